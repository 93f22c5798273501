"""Start RescuEdge.

Launch arguments are passed through to the application, so config values can
be overridden on the command line:

    python run.py --server.port=9090 --log-level=DEBUG
"""
from rescuedge.bootstrap import main

if __name__ == '__main__':
    main()
