from __future__ import annotations

import sys

from order_placing.adapters.inbound.cli import run_cli
from order_placing.adapters.outbound.stdout_events import stdout_publish_event
from order_placing.bootstrap import build_workflow
from order_placing.config import InvalidSettingError, load_settings
from order_placing.logging import configure_logging


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    if not argv:
        print("usage: order-placing '<json>'")
        return 2

    try:
        settings = load_settings()
    except InvalidSettingError as e:
        print(f"invalid_config: {e}")
        return 2

    configure_logging(settings.log_level)
    workflow = build_workflow(settings)
    return run_cli(workflow, argv[0], stdout_publish_event)


if __name__ == "__main__":
    raise SystemExit(main())
