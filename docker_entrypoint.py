import os
import sys
from pathlib import Path

APP_DIR = Path(__file__).resolve().parent


def streamlit_args() -> list:
    port = os.getenv("STREAMLIT_SERVER_PORT", "8501")
    address = os.getenv("STREAMLIT_SERVER_ADDRESS", "0.0.0.0")

    return [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        str(APP_DIR / "app.py"),
        "--server.port",
        str(port),
        "--server.address",
        str(address),
    ]


def main() -> None:
    settings_file = os.getenv("RIVER_OUTFITTERS_SETTINGS")
    if settings_file and not Path(settings_file).exists():
        print(
            f"[river-outfitters] Settings file not found: {settings_file}. "
            "Falling back to defaults.",
            file=sys.stderr,
        )

    args = streamlit_args()
    os.execvp(args[0], args)


if __name__ == "__main__":
    main()
