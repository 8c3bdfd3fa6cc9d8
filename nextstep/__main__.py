import sys

from nextstep.launcher import main

sys.exit(main())
