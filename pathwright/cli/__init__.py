"""
Pathwright CLI.

The `pathwright` command inspects and exercises a YAML or JSON route table.

Usage:
    pathwright routes -f routes.yaml
    pathwright check -f routes.yaml
    pathwright match -f routes.yaml GET /users/42
    pathwright url -f routes.yaml user_show id=42 --host
"""

__version__ = "0.1.0"
__cli_name__ = "pathwright"


def main():
    """Wrapper to avoid eager import of __main__ which causes warnings with -m."""
    from .__main__ import main as _main
    return _main()
