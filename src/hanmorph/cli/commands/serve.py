"""
Run the API server.
"""

import uvicorn


def add_subparser(subparsers):
    parser = subparsers.add_parser("serve", help="Run the hanmorph API server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.set_defaults(func=run)


def run(args):
    uvicorn.run("hanmorph.server.main:app", host=args.host, port=args.port, reload=args.reload)
