"""Run the API server."""

import uvicorn


def add_subparser(subparsers):
    parser = subparsers.add_parser("serve", help="Run the API server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.set_defaults(func=run_serve)


def run_serve(args):
    uvicorn.run("lexnote.server.main:app", host=args.host, port=args.port, reload=args.reload)
