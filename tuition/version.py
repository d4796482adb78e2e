"""Calculator version, stamped on batch output so exported rate sheets can be traced."""

VERSION = "2025.08.0"
