import sys

from docman_client.main import run

sys.exit(run())
