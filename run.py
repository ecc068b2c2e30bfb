"""Start the Event Registration API on the configured host and port.

Configuration such as MONGODB_URI, DATABASE_NAME, COLLECTION_NAME,
PORT and APP_ENV is read from the environment or a `.env` file in the
working directory.  When APP_ENV is ``production`` nothing is started;
point the hosting platform at ``registration_api.app.main:app``.

Usage:
    python run.py
"""
import sys

from registration_api.app.server import main


if __name__ == "__main__":
    sys.exit(main())
