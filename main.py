"""Entry point for querying a directory through the workspace resolver."""

from workspace_resolver.workspace_cli import main

if __name__ == "__main__":
    raise SystemExit(main())
