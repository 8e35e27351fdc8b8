#!/usr/bin/env python3
"""
使用上下文管理器的消费者示例

QueueConsumer 退出时会自动关闭通道和连接；
这里用一个定时器代替中断信号来停止消费。
"""

import logging
import threading

from use_rabbitmq_consumer import ConsumerConfig, QueueConsumer

logging.basicConfig(level=logging.INFO)


def consume_for(seconds: float):
    stop_event = threading.Event()
    timer = threading.Timer(seconds, stop_event.set)

    with QueueConsumer(ConsumerConfig(queue_name="test_queue")) as consumer:
        consumer.start()
        timer.start()
        try:
            consumer.consume(stop_event)
        finally:
            timer.cancel()
    # 连接会在这里自动关闭
    print(f"consumer state: {consumer.state.value}")


if __name__ == "__main__":
    consume_for(10)
