import argparse
import json
import logging
import sys

from tqdm import tqdm

from flatfold.config import Config
from flatfold.errors import CreasePatternError, PatternFormatError
from flatfold.pattern_file import load_pattern
from flatfold.validator import diagnose, validate


logger = logging.getLogger(__name__)


def _error_type(error):
    """エラーの種類を報告用の文字列に変換する"""
    if isinstance(error, PatternFormatError):
        # ファイルが読めない場合と、内容が不正な場合を区別する
        if isinstance(error.__cause__, (json.JSONDecodeError, OSError)):
            return "File Error"
        return "Format Error"
    return type(error).__name__


def validate_pattern_file(file_path, config=None, detailed=False):
    """
    パターンファイルを読み込み、平坦折り畳み可能性の局所条件を検証する
    """
    config = config if config is not None else Config()
    try:
        graph = load_pattern(file_path, check_symmetry=config.CHECK_SYMMETRY)
        if detailed:
            return diagnose(graph, config)
        return validate(graph, config).to_dict()
    except CreasePatternError as e:
        logger.error("%s: %s", file_path, e)
        return {"valid": False, "errors": [{"type": _error_type(e), "message": str(e)}]}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="flatfold",
        description="Check crease patterns against the local flat-foldability conditions.",
    )
    parser.add_argument("patterns", nargs="+", help="pattern JSON file(s)")
    parser.add_argument("--config", help="JSON file with Config overrides")
    parser.add_argument(
        "--diagnose", action="store_true",
        help="report every local violation instead of the first failed check",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable info logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.from_file(args.config) if args.config else Config()
    except CreasePatternError as e:
        logger.error("%s", e)
        return 2

    if len(args.patterns) == 1:
        result = validate_pattern_file(args.patterns[0], config, args.diagnose)
        print(json.dumps(result, indent=2))
        return 0 if result["valid"] else 1

    results = {}
    for file_path in tqdm(args.patterns, desc="Validating", unit="pattern"):
        results[file_path] = validate_pattern_file(file_path, config, args.diagnose)
    print(json.dumps(results, indent=2))
    return 0 if all(r["valid"] for r in results.values()) else 1


if __name__ == '__main__':
    sys.exit(main())
