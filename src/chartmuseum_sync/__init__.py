"""Copy missing chart versions between ChartMuseum servers."""

__version__ = "0.1.0"
