"""package.json patching."""

import json
from pathlib import Path

from lcs_generator.helpers.helpers_logging import (
    print_dry_run,
    print_info,
    print_success,
    print_warning,
)


def patch_package_json(project_path: Path, service_name: str, dry_run: bool = False) -> bool:
    """Set ``name`` in the project's package.json to ``service_name``.

    Returns:
        True if the manifest exists (and was, or would be, patched).
    """
    print_info("Modifying package.json...")
    package_json_path = project_path / "package.json"
    if dry_run:
        print_dry_run(
            f"Would modify package.json at {package_json_path} with service name {service_name}"
        )
        return True
    if not package_json_path.exists():
        print_warning("package.json not found in template.")
        return False

    manifest = json.loads(package_json_path.read_text(encoding="utf-8"))
    manifest["name"] = service_name
    package_json_path.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    print_success("Modified package.json.")
    return True
