from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.event_publisher import InMemoryEventPublisher
from src.adapter.services.message_sender import InMemoryMessageSender, RedisMessageSender
from src.adapter.services.token_generator import SecureTokenGenerator
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.event_publisher import IEventPublisher
from src.app.services.message_sender import IMessageSender
from src.app.use_cases.password_recovery import (
    PasswordRecoveryConfig,
    PasswordRecoveryService,
    UpdatePasswordHandler,
)

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

event_publisher = InMemoryEventPublisher()
token_generator = SecureTokenGenerator()


def get_message_sender(config=ApplicationConfig) -> IMessageSender:
    if config.MESSAGE_BROKER == "memory":
        return InMemoryMessageSender()
    redis = Redis.from_url(config.REDIS_URL, encoding="utf-8", decode_responses=True)
    return RedisMessageSender(redis)


def build_password_recovery_service(
    uow: SqlAlchemyUnitOfWork,
    message_sender: IMessageSender,
    publisher: IEventPublisher = event_publisher,
    config=ApplicationConfig,
) -> PasswordRecoveryService:
    return PasswordRecoveryService(
        uow,
        token_generator,
        message_sender,
        publisher,
        PasswordRecoveryConfig.from_application_config(config),
    )


def register_event_handlers(
    publisher: IEventPublisher = event_publisher, session_factory=AsyncSessionLocal
) -> None:
    """Subscribe the password mutation handler, one session per event."""

    async def handle_update_password(event) -> None:
        async with session_factory() as session:
            await UpdatePasswordHandler(SqlAlchemyUnitOfWork(session))(event)

    publisher.subscribe(handle_update_password)
