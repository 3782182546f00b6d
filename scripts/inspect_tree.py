"""Build a named-node tree from an HTML page and search it by name."""

from __future__ import annotations

import argparse
from pathlib import Path

import httpx

from nametree.builders import tree_from_html
from nametree.config import NAMETREE_FETCH_TIMEOUT_S, NAMETREE_USER_AGENT
from nametree.rendering import render_tree
from nametree.search import count_nodes, find_all_by_name, find_path_by_name, tree_depth
from nametree.utils.logging_config import configure_logging, get_logger

logger = get_logger("nametree.scripts.inspect_tree")


def main() -> None:
    parser = argparse.ArgumentParser(description="Print an HTML element tree and look up nodes by name.")
    parser.add_argument("--url", help="URL to fetch")
    parser.add_argument("--file", help="Local HTML file path")
    parser.add_argument("--name", help="Node name to search for")
    parser.add_argument("--name-attr", help="Attribute used as node name (e.g. id), falls back to tag name")
    parser.add_argument("--outline", action="store_true", help="Render as a Markdown outline")
    parser.add_argument("--log-level", default=None, help="Override NAMETREE_LOG_LEVEL")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    configure_logging(args.log_level)
    html = load_html(url=args.url, file_path=args.file)
    root = tree_from_html(html, name_attr=args.name_attr)

    print(render_tree(root, style="outline" if args.outline else "tree"))
    print(f"\nNodes: {count_nodes(root)}")
    print(f"Depth: {tree_depth(root)}")

    if args.name is None:
        return

    path = find_path_by_name(root, args.name)
    if path is None:
        print(f"\nNo node named {args.name!r}")
        return
    print(f"\nFirst match: {' > '.join(node.name for node in path)}")
    print(f"Total matches: {len(find_all_by_name(root, args.name))}")


def load_html(*, url: str | None, file_path: str | None) -> str:
    if url:
        logger.info("Fetching document", extra={"url": url})
        response = httpx.get(
            url,
            follow_redirects=True,
            timeout=NAMETREE_FETCH_TIMEOUT_S,
            headers={"User-Agent": NAMETREE_USER_AGENT},
        )
        response.raise_for_status()
        return response.text

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"HTML file not found: {path}")
    return path.read_text(encoding="utf-8")


if __name__ == "__main__":
    main()
