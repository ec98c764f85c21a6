import asyncio
import logging

from sqlmodel import SQLModel

from config import ApplicationConfig
from src.adapter.scheduler.expired_token_sweeper import ExpiredTokenSweeper
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import (
    AsyncSessionLocal,
    build_password_recovery_service,
    engine,
    get_message_sender,
    register_event_handlers,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    message_sender = get_message_sender()
    register_event_handlers()

    async def sweep_expired_tokens() -> int:
        async with AsyncSessionLocal() as session:
            service = build_password_recovery_service(
                SqlAlchemyUnitOfWork(session), message_sender
            )
            return await service.delete_all_expired_password_reset_tokens()

    sweeper = ExpiredTokenSweeper(
        sweep_expired_tokens,
        interval_seconds=ApplicationConfig.SWEEP_INTERVAL_SECONDS,
        startup_delay_seconds=ApplicationConfig.SWEEP_STARTUP_DELAY_SECONDS,
    )
    if ApplicationConfig.SWEEP_ENABLED:
        sweeper.start()

    try:
        await asyncio.Event().wait()
    finally:
        await sweeper.stop()
        await message_sender.close()
        await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Worker stopped")
