"""mern-cli -- interactive scaffolder for MERN (MongoDB, Express, React, Node) projects."""

__version__ = "1.0.0"
