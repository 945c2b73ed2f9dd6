import sys

from termsnake.main import main

sys.exit(main())
