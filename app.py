"""Entry point for running the Flask development server."""

import logging

from leave_desk import create_app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True)
