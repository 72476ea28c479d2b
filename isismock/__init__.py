"""IS-IS PDU headers and TLVs, and a menu-driven interactive command line toolkit."""

__version__ = "0.1.0"