"""라이브러리 식별 상수 (notifier 블록, User-Agent)"""

NAME = "rollbar-client"
VERSION = "0.1.0"
USER_AGENT = f"{NAME}/{VERSION}"

# payload data.language
LANGUAGE = "python"
