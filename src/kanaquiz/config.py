class Settings:
    PROJECT_NAME: str = "kanaquiz"
    DEBUG: bool = False
    LOG_DIR: str = "log"
    LOG_FILE: str = "kanaquiz.log"
    LOG_MAX_BYTES: int = 5_000_000
    LOG_BACKUP_COUNT: int = 3
    QUESTIONS_PER_SESSION: int = 10
    OPTION_COUNT: int = 4
    RESTART_ANSWER: str = "yes"


settings = Settings()
