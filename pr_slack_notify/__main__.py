import asyncio

from pr_slack_notify.cli_notify import main


def run() -> int:
    return asyncio.run(main())


if __name__ == "__main__":
    raise SystemExit(run())
