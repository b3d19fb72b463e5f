import sys

from anagramchain import main

sys.exit(main())
