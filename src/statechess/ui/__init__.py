"""Terminal front end: settings, board rendering and the console loop."""
