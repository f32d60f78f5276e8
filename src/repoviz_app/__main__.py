"""
Main entry point for RepoViz.

Loads a repository, builds its graph and writes the {nodes, edges}
payload for the rendering surface as JSON.

Usage:
    python -m repoviz_app REPO --connections connections.json [--focus PATH]
    repoviz REPO ...  (if installed)
"""

import argparse
import json
import logging
import sys
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="repoviz", description=__doc__.strip().splitlines()[0])
    parser.add_argument("repo", help="Repository directory")
    parser.add_argument("--connections", type=Path,
                        help="JSON list of connections (from/to/fromFile/toFile/type)")
    parser.add_argument("--focus", help="Root-relative path of the focal file")
    parser.add_argument("--layout", choices=["tree", "force"], help="Force a layout")
    parser.add_argument("-o", "--output", type=Path, help="Write JSON here instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    """Run RepoViz headless."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Ensure src is in path for development
    src_path = Path(__file__).parent.parent
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))

    from repoviz_core.adapters import LocalScanner, StaticConnectionSource
    from repoviz_core.domain import FileInfo, LayoutMode
    from repoviz_core.services import RepositoryLoader
    from repoviz_app.viewmodels import GraphVM, RepositoryVM, AppCoordinator

    raw = []
    if args.connections:
        raw = json.loads(args.connections.read_text(encoding="utf-8"))

    repository_vm = RepositoryVM(RepositoryLoader(LocalScanner(), StaticConnectionSource(raw)))
    graph_vm = GraphVM()
    coordinator = AppCoordinator(repository_vm, graph_vm)

    repository_vm.open_repository(args.repo)
    if not repository_vm.load():
        logging.getLogger("repoviz").error(repository_vm.error)
        return 1

    if args.layout:
        graph_vm.set_layout_mode(LayoutMode(args.layout))
    if args.focus:
        focal = next(
            (f for f in repository_vm.file_tree[0].walk() if f.path == args.focus),
            FileInfo(name=Path(args.focus).name, path=args.focus, is_dir=False),
        )
        coordinator.select_file(focal)

    if graph_vm.empty_message:
        logging.getLogger("repoviz").warning(graph_vm.empty_message)

    text = json.dumps(graph_vm.payload(), indent=2)
    if args.output:
        args.output.write_text(text, encoding="utf-8")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
