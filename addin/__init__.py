"""Task pane client for the AI Email Assistant Outlook add-in."""
