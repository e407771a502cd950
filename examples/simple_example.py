"""
Simple example of the NozesIA job queue.

Wires a custom AI response handler that fails once, enqueues a few jobs and
prints the queue stats once everything has run.
"""

import asyncio
import logging

from nozesia_jobs import JobQueue, JobQueueConfig, JobRegistry, initialize_default_handlers

logging.basicConfig(level=logging.INFO)

attempts = {}


async def send_ai_response(payload):
    """Pretend the first delivery attempt hits a flaky WhatsApp session."""
    count = attempts.get(payload.conversation_id, 0) + 1
    attempts[payload.conversation_id] = count
    if count == 1:
        raise ConnectionError("WhatsApp session not connected")
    print(f"Replied to {payload.customer_phone}: thanks for reaching out")


async def main():
    registry = JobRegistry()
    initialize_default_handlers(registry)
    registry.register("SEND_AI_RESPONSE", send_ai_response)

    queue = JobQueue(config=JobQueueConfig(backoff_base_seconds=1), registry=registry)

    queue.queue_message_processing(
        {
            "conversationId": "conv-1",
            "companyId": "company-1",
            "messageContent": "Vocês abrem no domingo?",
            "messageType": "TEXT",
            "senderPhone": "5511999999999",
            "sessionName": "loja-centro",
        }
    )
    queue.queue_ai_response(
        {
            "conversationId": "conv-1",
            "companyId": "company-1",
            "agentId": "agent-1",
            "customerMessage": "Vocês abrem no domingo?",
            "sessionName": "loja-centro",
            "customerPhone": "5511999999999",
        }
    )
    queue.add_job("SEND_NOTIFICATION", {"company_id": "company-1", "title": "Nova conversa"})

    await queue.join()

    stats = queue.get_queue_stats()
    print(f"completed={stats.completed} failed={stats.failed}")
    for job in stats.recent_jobs:
        print(job)


if __name__ == "__main__":
    asyncio.run(main())
