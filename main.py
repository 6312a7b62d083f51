#!/usr/bin/env python3
"""Main entry point: validate a tree definition and list its outcomes."""

import argparse

from tmx_nodes.common.config import get_settings
from tmx_nodes.common.logging import configure_package_logging
from tmx_nodes.orchestration import build_tree, load_tree_config


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Validate a ThreatMetrix tree definition")
    parser.add_argument("tree", nargs="?", default="config/login_tree.yaml")
    args = parser.parse_args()

    settings = get_settings()
    logger = configure_package_logging(settings.log_level.value)
    logger.info(f"tmx_nodes initialized in {settings.environment.value} mode")

    with build_tree(load_tree_config(args.tree)) as tree:
        for node_id, node in tree.nodes.items():
            outcomes = ", ".join(node.outcome_ids(node.config))
            logger.info(f"{node_id} ({node.name}): {outcomes}")


if __name__ == "__main__":
    main()
