import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from sadaqa.config import CONTENT_DIR, INDEXED_COLLECTIONS
from sadaqa.indexes import generate_indexes


def main(argv=None):
    parser = argparse.ArgumentParser(description="Write index.json manifests for the content collections.")
    parser.add_argument("--content", default=str(CONTENT_DIR), help="content directory (default: %(default)s)")
    parser.add_argument("collections", nargs="*", default=list(INDEXED_COLLECTIONS))
    args = parser.parse_args(argv)

    generate_indexes(Path(args.content), args.collections)
    return 0


if __name__ == "__main__":
    sys.exit(main())
