"""Server command - run the API with uvicorn."""

import cyclopts
import uvicorn

from bloglist.cli.console import get_console

app = cyclopts.App(name="server", help="Run the bloglist API server")

APP_PATH = "bloglist.application.api.rest.app:app"


@app.default
def server(
    host: str = "127.0.0.1",
    port: int = 8000,
    reload: bool = False,
) -> None:
    """Run the server in the foreground.

    Args:
        host: Host to bind to.
        port: Port to listen on.
        reload: Restart on code changes (development only).
    """
    get_console().info(f"Serving {APP_PATH} on http://{host}:{port}")
    uvicorn.run(APP_PATH, host=host, port=port, reload=reload)
