"""redux-scaffold — add a Redux store to a Next.js app in one command."""

__version__ = "0.1.0"
