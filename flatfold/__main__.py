import sys

from flatfold.cli import main


sys.exit(main())
