import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.event_publisher import InMemoryEventPublisher
from src.adapter.services.message_sender import InMemoryMessageSender
from src.adapter.services.token_generator import SecureTokenGenerator
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.password_recovery import PasswordRecoveryConfig, PasswordRecoveryService
from src.depends import register_event_handlers
from src.domain.entities import User


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def user(db_session):
    user = User(name="Foo", email="foo@bar.com", password_hash="old_hash")
    db_session.add(user)
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def message_sender():
    return InMemoryMessageSender()


@pytest_asyncio.fixture
async def event_publisher(session_factory):
    publisher = InMemoryEventPublisher(record_events=True)
    register_event_handlers(publisher, session_factory)
    return publisher


@pytest_asyncio.fixture
async def service(db_session, message_sender, event_publisher):
    return PasswordRecoveryService(
        SqlAlchemyUnitOfWork(db_session),
        SecureTokenGenerator(),
        message_sender,
        event_publisher,
        PasswordRecoveryConfig(token_expiration_hours=24, email_topic="email"),
    )
