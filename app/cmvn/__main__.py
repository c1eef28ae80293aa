"""Allow running cmvn as ``python -m cmvn``."""

from cmvn.cli.main import app

if __name__ == "__main__":
    app(prog_name="cmvn")
