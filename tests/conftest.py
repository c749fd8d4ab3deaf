"""Test configuration and fixtures."""

import logfire

# Keep spans local; tests never talk to Logfire cloud
logfire.configure(send_to_logfire=False, console=False)
