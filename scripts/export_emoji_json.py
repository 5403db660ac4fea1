import argparse
import sys
from pathlib import Path

# --- Path Setup ---
# This script is intended to be run from the project root directory.
# The project root is added to the Python path to allow importing from the 'src' package.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from src.emojipick.core.dataset_resolver import dataset_version_for, resolve_catalog
from src.emojipick.utils.json_export import export_dataset

# --- Constants ---
DEFAULT_PLATFORM_VERSION = 15.4
DEFAULT_OUTPUT_DIR = PROJECT_ROOT / "data" / "emoji_definitions"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export the emoji dataset for a platform version as one JSON file per category."
    )
    parser.add_argument(
        "--platform-version",
        type=float,
        default=DEFAULT_PLATFORM_VERSION,
        help=f"Platform version to resolve the dataset for (default: {DEFAULT_PLATFORM_VERSION}).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Directory to write the JSON files to (default: {DEFAULT_OUTPUT_DIR}).",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """
    Main script execution function.
    1. Resolves the dataset for the requested platform version.
    2. Writes each category to '<localizeKey>.json' in the output directory.
    """
    args = parse_args(argv)
    print("--- Starting Emoji JSON Export ---")

    emoji_version = dataset_version_for(args.platform_version)
    catalog = resolve_catalog(args.platform_version)
    print(f"Platform version {args.platform_version} uses emoji dataset {emoji_version}.")

    try:
        paths = export_dataset(catalog, args.output)
    except OSError as e:
        print(f"\nFATAL ERROR: Failed to write JSON files: {e}")
        sys.exit(1)

    for category, path in zip(catalog, paths):
        print(f"  - {path.name}: {len(category.entries)} emojis")
    print("--- Emoji JSON Export Complete! ---")


if __name__ == "__main__":
    main()
