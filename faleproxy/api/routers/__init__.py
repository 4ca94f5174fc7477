"""Route modules mounted by :func:`faleproxy.api.app.create_app`."""
