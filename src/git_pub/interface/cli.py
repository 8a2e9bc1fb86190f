import argparse
import logging
import sys

from git_pub.application.use_cases import list_pub_tags
from git_pub.config import DEFAULT_PUB_TAG_PATTERN, PubConfig
from git_pub.infrastructure.git_cli_reader import DEFAULT_TIMEOUT, GitCliReader, GitError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _positive_float(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number: '{value}'")
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"Must be positive: '{value}'")
    return seconds


def _error_exit(msg: str) -> None:
    """Print error message to stderr and exit with code 1."""
    print(f"Error: {msg}", file=sys.stderr)
    sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-pub",
        description="Publish the tagged snapshots of a git repository over HTTP",
    )
    parser.add_argument(
        "git_dir",
        help="Path to a .git directory or bare repository",
    )
    parser.add_argument(
        "--pattern",
        default=DEFAULT_PUB_TAG_PATTERN,
        metavar="REGEX",
        help=f"Publish only tags fully matching REGEX (default: {DEFAULT_PUB_TAG_PATTERN})",
    )
    parser.add_argument(
        "--title",
        default="",
        help="Page title (default: repository directory name)",
    )
    parser.add_argument(
        "--git-bin",
        dest="git_bin",
        default="git",
        help="git executable (default: git)",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        default=DEFAULT_TIMEOUT,
        metavar="SECONDS",
        help=f"Timeout for each git command (default: {DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Bind address (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=9292,
        help="HTTP port (default: 9292)",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--list-tags",
        dest="list_tags",
        action="store_true",
        help="Print the publish tags and exit",
    )
    return parser


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    try:
        config = PubConfig(
            git_dir=args.git_dir,
            pub_tag_pattern=args.pattern,
            title=args.title,
            git_bin=args.git_bin,
            timeout=args.timeout,
        )
        repo = GitCliReader(config.git_dir, git_bin=config.git_bin, timeout=config.timeout)
    except ValueError as e:
        _error_exit(str(e))

    if args.list_tags:
        try:
            tags = list_pub_tags(repo, config.pub_tag_pattern)
        except GitError as e:
            _error_exit(str(e))
        for tag in tags:
            print(tag)
        return

    from git_pub.web.server import launch

    launch(config, host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    main()
