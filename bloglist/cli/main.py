"""Main CLI application using Cyclopts.

The CLI is a thin HTTP client - it talks to the server via REST API,
except for `server`, which runs it.
"""

import cyclopts

from bloglist.cli.commands import server, stats

app = cyclopts.App(
    name="bloglist",
    help="bloglist - blog entries REST API",
)

app.command(server.app, name="server")
app.command(stats.app, name="stats")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
