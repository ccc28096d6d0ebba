import sys

from .tasks import main

sys.exit(main())
