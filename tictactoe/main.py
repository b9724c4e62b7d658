import logging

from dotenv import load_dotenv

from tictactoe.config import load_settings
from tictactoe.console import ConsoleSession

load_dotenv()


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ConsoleSession(settings).run()


if __name__ == "__main__":
    main()
