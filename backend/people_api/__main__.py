"""CLI entry point — `python -m people_api [--redirect URL] [--cred-file PATH]`.

Flags override the environment/.env settings; uvicorn then serves the app
until the process is killed.
"""

import argparse

import uvicorn

from people_api.config import Settings, get_settings
from people_api.main import create_app


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="people_api", description="Person records HTTP API",
    )
    parser.add_argument(
        "--redirect", default=defaults.redirect_url,
        help="URL the OAuth2 provider redirects back to",
    )
    parser.add_argument(
        "--cred-file", default=defaults.credentials_file,
        help="OAuth2 credentials JSON file",
    )
    parser.add_argument("--host", default=defaults.host)
    parser.add_argument("--port", type=int, default=defaults.port)
    return parser


def settings_from_args(argv: list[str] | None = None) -> Settings:
    defaults = get_settings()
    args = build_parser(defaults).parse_args(argv)
    return defaults.model_copy(update={
        "redirect_url": args.redirect,
        "credentials_file": args.cred_file,
        "host": args.host,
        "port": args.port,
    })


def main(argv: list[str] | None = None) -> None:
    settings = settings_from_args(argv)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
