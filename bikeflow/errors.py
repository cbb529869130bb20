# bikeflow/errors.py


class DatasetLoadError(ValueError):
    """
    A station or trip dataset could not be read.
    Initialization stops when this is raised; nothing retries.
    """

    def __init__(self, source, message):
        super().__init__(f"{source}: {message}")
        self.source = str(source)
