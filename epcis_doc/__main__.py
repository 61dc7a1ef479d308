import sys

from epcis_doc.main import main

sys.exit(main())
