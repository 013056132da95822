"""Jinja2 template environment shared by the web routers."""

import os

from fastapi.templating import Jinja2Templates
from markupsafe import Markup

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")

templates = Jinja2Templates(directory=TEMPLATES_DIR)

# Form input is escaped once when it is accepted; mark it safe so the
# autoescaping environment does not escape it a second time.
templates.env.filters["sanitized"] = lambda value: Markup("" if value is None else value)
