"""a11yctl: aggregate accessibility audit runs into compliance reports."""

__version__ = "0.3.0"
