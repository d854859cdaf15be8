import sys

from smskit.cli import main

sys.exit(main())
