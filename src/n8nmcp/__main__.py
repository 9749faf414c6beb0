# Allow `python -m n8nmcp`
import sys

from n8nmcp.cli import main

sys.exit(main())
