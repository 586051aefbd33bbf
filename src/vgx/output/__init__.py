"""Report renderers — JSON and Rich terminal output."""
