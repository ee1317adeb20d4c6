import argparse
import logging

import dash

from .callbacks import register_callbacks
from .layout import make_layout
from .logging_config import setup_logging


def build_app(debug: bool = False) -> dash.Dash:
    setup_logging(logging.DEBUG if debug else logging.INFO)
    app = dash.Dash(__name__, title="Hyperbolic Graph Viewer")
    app.layout = make_layout()
    register_callbacks(app)
    return app


def main(argv=None) -> None:
    p = argparse.ArgumentParser(description="Interactive viewer for graphs in the Poincaré disk")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8050)
    p.add_argument("--debug", action="store_true")
    args = p.parse_args(argv)

    app = build_app(debug=args.debug)
    app.run(debug=args.debug, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
