BOOLTABLE_VERSION = '0.0.1'  # version of the client package
