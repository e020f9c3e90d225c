"""
Queue publisher: serializes canonical events and hands them to a producer.
"""

from waba_webhooks.core.errors import PublishFailureError
from waba_webhooks.core.logging.logger import ContextLogger, get_logger
from waba_webhooks.messaging.queue.producers import EventProducer
from waba_webhooks.schemas.events import CanonicalEvent


class QueuePublisher:
    """
    Publishes canonical events to one queue.

    The queue name is fixed at construction; every failure is raised as
    PublishFailureError with the original exception as its cause.
    """

    def __init__(
        self,
        producer: EventProducer,
        queue_name: str,
        logger: ContextLogger | None = None,
    ):
        self.producer = producer
        self.queue_name = queue_name
        self.logger = logger or get_logger(__name__)

    async def publish(self, event: CanonicalEvent) -> None:
        """
        Serialize and enqueue one event.

        Raises:
            PublishFailureError: If serialization or the producer hand-off fails
        """
        try:
            message_body = event.to_queue_json()
            await self.producer.send_message_to_queue(message_body, self.queue_name)
        except Exception as e:
            self.logger.error(
                f"Failed to send {event.type.value} to queue {self.queue_name} "
                f"for wabaId={event.waba_id}: {e}"
            )
            raise PublishFailureError(
                f"Failed to queue {event.type.value}", queue_name=self.queue_name
            ) from e

        template_info = event.template_info
        quality_update = template_info.quality_update if template_info else None
        self.logger.info(
            f"Queued {event.type.value} -> wabaId={event.waba_id}, "
            f"templateId={template_info.template_id if template_info else None}, "
            f"previousQualityScore="
            f"{quality_update.previous_quality_score if quality_update else None}, "
            f"newQualityScore={quality_update.new_quality_score if quality_update else None}"
        )
