from ..settings import Settings

class DevelopmentSettings(Settings):
    debug: bool = True
    log_level: str = "DEBUG"
