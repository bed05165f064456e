"""
Command-line entrypoint for the PixAI client.

Interface responsibilities:
- Parse the prompt, generation options, output directory, and polling bounds.
- Build one `GraphQLTransport` and one `PixAIClient` for the invocation.
- Report the terminal task status and the saved image path.

Error handling strategy:
- Missing API key -> argparse usage error (exit code 2).
- `PixAIError` -> one-line message naming the failed step (exit code 1).
- Ctrl-C while polling or during a request -> "Operation cancelled by user."
  (exit code 130).
- A `failed`/`cancelled` task status exits with code 1.
"""

import argparse
import logging
import sys

from pixai import settings
from pixai.core import PixAIClient
from pixai.errors import OperationCancelled, PixAIError
from pixai.jobs import CancellationToken, PollPolicy
from pixai.models import JobStatus
from pixai.transport import GraphQLTransport

EXIT_CANCELLED = 130


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pixai-generate",
        description="Generate an image with PixAI and save it locally",
    )
    parser.add_argument("prompt", help="Text prompt for the image")
    parser.add_argument("--output-dir", default=settings.OUTPUT_DIR,
                        help="Directory for the downloaded image (default: current directory)")
    parser.add_argument("--api-key", default=None,
                        help=f"Bearer token (default: PIXAI_API_KEY or {settings.KEY_FILE})")
    parser.add_argument("--api-url", default=settings.API_URL)

    options = parser.add_argument_group("generation options")
    options.add_argument("--negative-prompt")
    options.add_argument("--sampling-steps", type=int)
    options.add_argument("--cfg-scale", type=float)
    options.add_argument("--upscale", type=float)
    options.add_argument("--width", type=int)
    options.add_argument("--height", type=int)
    options.add_argument("--sampler")
    options.add_argument("--model-id")
    options.add_argument("--enable-tile", action=argparse.BooleanOptionalAction, default=None)

    polling = parser.add_argument_group("polling")
    polling.add_argument("--poll-interval", type=float, default=settings.POLL_INTERVAL,
                         help="Seconds between status checks (default: %(default)s)")
    polling.add_argument("--poll-timeout", type=float, default=settings.POLL_TIMEOUT,
                         help="Give up after this many seconds of polling")
    polling.add_argument("--max-polls", type=int, default=settings.MAX_POLLS,
                         help="Give up after this many status checks")
    polling.add_argument("--request-timeout", type=float, default=settings.REQUEST_TIMEOUT,
                         help="Per-request HTTP timeout in seconds")

    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def apply_options(builder, args):
    """Forward the options given on the command line to the config builder."""
    setters = [
        (args.negative_prompt, builder.set_negative_prompt),
        (args.sampling_steps, builder.set_sampling_steps),
        (args.cfg_scale, builder.set_cfg_scale),
        (args.upscale, builder.set_upscale),
        (args.width, builder.set_width),
        (args.height, builder.set_height),
        (args.sampler, builder.set_sampler),
        (args.model_id, builder.set_model_id),
        (args.enable_tile, builder.set_enable_tile),
    ]
    for value, setter in setters:
        if value is not None:
            setter(value)
    return builder


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    api_key = args.api_key or settings.load_key(settings.KEY_FILE)
    if not api_key:
        parser.error(f"no API key: pass --api-key, set PIXAI_API_KEY, or create {settings.KEY_FILE}")

    policy = PollPolicy(
        interval=args.poll_interval,
        max_attempts=args.max_polls,
        timeout=args.poll_timeout,
    )
    token = CancellationToken()

    with GraphQLTransport(api_key, url=args.api_url, timeout=args.request_timeout) as transport:
        client = PixAIClient(transport, output_dir=args.output_dir, poll_policy=policy)
        apply_options(client.config_builder, args)

        try:
            result = client.generate(args.prompt, cancel_token=token)
        except (OperationCancelled, KeyboardInterrupt):
            print("\nOperation cancelled by user.", file=sys.stderr)
            return EXIT_CANCELLED
        except PixAIError as err:
            print(f"Error during {err.step}: {err}", file=sys.stderr)
            return 1

    print(f"Task status: {result.status.value}")
    if result.path is not None:
        print(f"Image saved: {result.path}")
    return 0 if result.status is JobStatus.COMPLETED else 1


if __name__ == "__main__":
    sys.exit(main())
