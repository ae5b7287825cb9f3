"""Stats command - show blog summary statistics."""

import sys

import cyclopts
import httpx

from bloglist.cli.console import get_console
from bloglist.cli.util import get_server_url, with_retry

app = cyclopts.App(name="stats", help="Show blog statistics")


@app.default
def stats() -> None:
    """Show total likes, the favourite blog and the top authors."""
    console = get_console()
    server_url = get_server_url()
    url = f"{server_url}/api/stats"

    try:
        response = with_retry(
            lambda: httpx.get(url),
            exceptions=(httpx.ReadError, httpx.ConnectError),
        )
        response.raise_for_status()
        data = response.json()
    except httpx.ConnectError:
        console.error(
            f"Could not connect to server at {server_url}",
            hint="Is the server running? Start it with: bloglist server",
        )
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        console.error(f"Server error: {e.response.status_code} - {e.response.text}")
        sys.exit(1)
    except httpx.ReadError:
        console.error("Connection lost while reading response")
        sys.exit(1)

    console.print(f"[bold]Blogs:[/bold] {data.get('total_blogs', 0):,}")
    console.print(f"[bold]Total likes:[/bold] {data.get('total_likes', 0):,}")

    favourite = data.get("favourite_blog")
    if favourite:
        console.print(
            f"[bold]Favourite:[/bold] [cyan]{favourite['title']}[/cyan] "
            f"by {favourite['author'] or 'unknown'} ({favourite['likes']:,} likes)"
        )
    else:
        console.print("[dim]No blogs yet[/dim]")
        return

    most_blogs = data.get("most_blogs", {})
    most_likes = data.get("most_likes", {})
    console.table(
        [
            {
                "metric": "Most blogs",
                "author": most_blogs.get("author", ""),
                "value": most_blogs.get("blogs", 0),
            },
            {
                "metric": "Most likes",
                "author": most_likes.get("author", ""),
                "value": most_likes.get("likes", 0),
            },
        ],
        [("metric", "Metric"), ("author", "Author"), ("value", "Value")],
        title="Top authors",
    )
