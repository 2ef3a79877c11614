import argparse
import logging
import socket

import uvicorn

from larder.api.api_run import app
from larder.api.deps import get_store
from larder.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from larder.utilities.seed import seed_demo


def get_local_ip() -> str:
    """Return a non-loopback local IP address if possible, otherwise '127.0.0.1'.

    Connecting a UDP socket sends nothing; it only makes the OS pick a source address.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def main(argv=None):
    parser = argparse.ArgumentParser(description="Serve the Larder API.")
    parser.add_argument("--host", default=APP_HOST)
    parser.add_argument("--port", type=int, default=APP_PORT)
    parser.add_argument("--seed", action="store_true", help="fill an empty store with demo data first")
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if args.seed:
        seed_demo(get_store())

    local_url = f"http://localhost:{args.port}"
    local_ip = get_local_ip()
    print(f"Uvicorn running on {local_url} (Press CTRL+C to quit)")
    if local_ip not in ("127.0.0.1", "localhost"):
        print(f"Accessible from other devices at: http://{local_ip}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
