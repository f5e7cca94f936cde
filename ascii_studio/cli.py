"""
Terminal front-end for the three modes, plus ``serve`` for the gateway.

Art goes to stdout, notices to stderr.
"""

import argparse
import asyncio
import logging
import sys

from ascii_studio import config
from ascii_studio.ascii_generator import AsciiGenerator
from ascii_studio.connections.gateway_client import GatewayClient
from ascii_studio.font_browser import FontBrowser
from ascii_studio.models import (
    DEFAULT_FONT,
    DEFAULT_JUSTIFY,
    DEFAULT_PREVIEW_TEXT,
    DEFAULT_WIDTH,
    JUSTIFY_CHOICES,
    MAX_WIDTH,
    MIN_WIDTH,
)
from ascii_studio.random_ascii import RandomAscii


def width_arg(value):
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: {value!r}")
    if not MIN_WIDTH <= width <= MAX_WIDTH:
        raise argparse.ArgumentTypeError(f"width must be between {MIN_WIDTH} and {MAX_WIDTH}")
    return width


def build_parser():
    parser = argparse.ArgumentParser(prog="ascii-studio", description="Turn text into ASCII art")
    parser.add_argument("--gateway", default=None, help="gateway base URL")
    sub = parser.add_subparsers(dest="command", required=True)

    fonts = sub.add_parser("fonts", help="list available fonts")
    fonts.add_argument("--search", default="", help="case-insensitive name filter")

    generate = sub.add_parser("generate", help="render text with a chosen font")
    generate.add_argument("text")
    generate.add_argument("--font", default=DEFAULT_FONT)
    generate.add_argument("--width", type=width_arg, default=DEFAULT_WIDTH)
    generate.add_argument("--justify", choices=JUSTIFY_CHOICES, default=DEFAULT_JUSTIFY)

    preview = sub.add_parser("preview", help="preview a single font")
    preview.add_argument("font")
    preview.add_argument("--text", default=DEFAULT_PREVIEW_TEXT)

    random_cmd = sub.add_parser("random", help="render in a font picked by the backend")
    random_cmd.add_argument("text", nargs="?", default="")

    serve = sub.add_parser("serve", help="run the gateway server")
    serve.add_argument("--host", default=config.HOST)
    serve.add_argument("--port", type=int, default=config.PORT)
    return parser


def print_notices(controller, out):
    for notice in controller.notices:
        print(f"{notice.title}: {notice.description}", file=out)


async def run_fonts(client, args, out, err):
    browser = FontBrowser(client)
    await browser.load_fonts()
    browser.search_term = args.search
    print_notices(browser, err)
    for name in browser.filtered_fonts:
        print(name, file=out)
    print(browser.status_line(), file=err)
    return 1 if browser.notices else 0


async def run_generate(client, args, out, err):
    generator = AsciiGenerator(client, text=args.text, font=args.font,
                               width=args.width, justify=args.justify)
    result = await generator.generate()
    print_notices(generator, err)
    if result is None:
        return 1
    print(f"Result (Font: {result.font_used})", file=err)
    print(result.ascii_art, file=out)
    return 0


async def run_preview(client, args, out, err):
    browser = FontBrowser(client, preview_text=args.text)
    art = await browser.preview_font(args.font)
    print_notices(browser, err)
    if art is None:
        return 1
    print(f'Preview of "{browser.selected_font}" font', file=err)
    print(art, file=out)
    return 0


async def run_random(client, args, out, err):
    randomizer = RandomAscii(client, custom_text=args.text)
    result = await randomizer.generate_random()
    print_notices(randomizer, err)
    if result is None:
        return 1
    print(f"Random ASCII Art (Font: {result.font_used})", file=err)
    print(result.ascii_art, file=out)
    return 0


COMMANDS = {
    "fonts": run_fonts,
    "generate": run_generate,
    "preview": run_preview,
    "random": run_random,
}


async def dispatch(args, out, err, transport=None):
    async with GatewayClient(base_url=args.gateway, transport=transport) as client:
        return await COMMANDS[args.command](client, args, out, err)


def serve(args):
    from ascii_studio.gateway import create_app

    app = create_app()
    logging.getLogger("cli").info(f"Starting gateway on {args.host}:{args.port}")
    app.run(host=args.host, port=args.port)
    return 0


def main(argv=None, out=None, err=None, transport=None):
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    args = build_parser().parse_args(argv)
    if args.command == "serve":
        return serve(args)
    return asyncio.run(dispatch(args, out or sys.stdout, err or sys.stderr, transport))


if __name__ == "__main__":
    sys.exit(main())
