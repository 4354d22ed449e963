"""Client library for the Twinfield accounting web services."""

__version__ = "0.1.0"


# The CLI pulls in click; only load it when asked for
def __getattr__(name):
    if name == "main":
        from twinfield.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
