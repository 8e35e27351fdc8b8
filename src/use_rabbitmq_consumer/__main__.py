import logging
import os
import sys

from dotenv import load_dotenv

from use_rabbitmq_consumer import ConfigError, ConsumerConfig, run_consumer

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main() -> int:
    """读取 .env 和环境变量，运行消费者，返回退出码"""
    load_dotenv()
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper(), format=LOG_FORMAT)
    try:
        config = ConsumerConfig.from_env()
    except ConfigError as exc:
        logger.error(f"Invalid RabbitMQ consumer configuration<{exc}>")
        return 1
    return run_consumer(config)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
