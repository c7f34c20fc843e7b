"""stagecraft: named views opened as cached, resizable Tk windows."""

__version__ = "0.1.0"
