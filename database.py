"""
Exercise Tracker MongoDB Database Connection.

Uses Motor async driver with Beanie ODM.
"""

from datetime import datetime
from typing import List, Optional, Union
import logging

from beanie import PydanticObjectId, SortDirection, init_beanie
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from tracker.models.mongodb import ExerciseDocument, UserDocument
from tracker.store import ExerciseRecord, ExerciseStore, UserRecord
from tracker.utils.errors import PersistenceError

logger = logging.getLogger(__name__)


def _user_record(doc: UserDocument) -> UserRecord:
    return UserRecord(id=str(doc.id), username=doc.username)


def _exercise_record(doc: ExerciseDocument) -> ExerciseRecord:
    return ExerciseRecord(
        id=str(doc.id),
        user_id=doc.user_id,
        description=doc.description,
        duration=doc.duration,
        date=doc.date,
    )


class MongoStore(ExerciseStore):
    """
    MongoDB-backed store.

    One instance is created per application and owns the Motor client.
    Beanie binds the document models to the database on ``connect``.

    Attributes:
        client: Motor async client instance.
        connected: Connection status flag.
    """

    def __init__(self, database_url: str, database_name: str):
        self.database_url = database_url
        self.database_name = database_name
        self.client: Optional[AsyncIOMotorClient] = None
        self.connected = False

    async def connect(self) -> None:
        """
        Connect to MongoDB and initialize Beanie ODM.

        Raises:
            Exception: If connection fails.
        """
        # Skip if already initialized (prevents multiple worker initialization)
        if self.connected:
            return

        try:
            self.client = AsyncIOMotorClient(
                self.database_url,
                serverSelectionTimeoutMS=5000,  # 5 second timeout
                maxPoolSize=50,  # Connection pool
                minPoolSize=10
            )

            db = self.client[self.database_name]

            # Test connection with ping
            await self.client.admin.command('ping')
            logger.info(f"Connected to MongoDB: {self.database_name}")

            await init_beanie(
                database=db,
                document_models=[
                    UserDocument,
                    ExerciseDocument,
                ]
            )
            logger.info("Beanie ODM initialized with all models")
            self.connected = True

        except Exception as e:
            logger.error(f"Error connecting to MongoDB: {e}")
            self.connected = False
            raise

    async def close(self) -> None:
        """Close MongoDB connection."""
        if self.client:
            self.client.close()
            self.connected = False
            logger.info("MongoDB connection closed")

    async def ping(self) -> bool:
        """Test MongoDB connection."""
        if not self.client:
            return False
        try:
            await self.client.admin.command('ping')
            return True
        except PyMongoError:
            return False

    async def insert_user(self, username: str) -> UserRecord:
        try:
            user = await UserDocument(username=username).insert()
        except PyMongoError as e:
            logger.error(f"Failed to insert user: {e}")
            raise PersistenceError(detail=str(e)) from e
        return _user_record(user)

    async def list_users(self) -> List[UserRecord]:
        try:
            users = await UserDocument.find_all().sort(
                [("_id", SortDirection.ASCENDING)]
            ).to_list()
        except PyMongoError as e:
            logger.error(f"Failed to list users: {e}")
            raise PersistenceError(detail=str(e)) from e
        return [_user_record(u) for u in users]

    async def get_user(self, user_id: str) -> Optional[UserRecord]:
        if not ObjectId.is_valid(user_id):
            return None
        try:
            user = await UserDocument.get(PydanticObjectId(user_id))
        except PyMongoError as e:
            logger.error(f"Failed to load user {user_id}: {e}")
            raise PersistenceError(detail=str(e)) from e
        return _user_record(user) if user else None

    async def insert_exercise(
        self,
        user_id: str,
        description: str,
        duration: Union[int, float],
        date: datetime,
    ) -> ExerciseRecord:
        exercise = ExerciseDocument(
            user_id=user_id,
            description=description,
            duration=duration,
            date=date,
        )
        try:
            await exercise.insert()
        except PyMongoError as e:
            logger.error(f"Failed to insert exercise for user {user_id}: {e}")
            raise PersistenceError(detail=str(e)) from e
        return _exercise_record(exercise)

    async def find_exercises(
        self,
        user_id: str,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[ExerciseRecord]:
        # MongoDB treats limit(0) as "no limit"
        if limit == 0:
            return []

        query = ExerciseDocument.find(ExerciseDocument.user_id == user_id)
        if date_from is not None:
            query = query.find(ExerciseDocument.date >= date_from)
        if date_to is not None:
            query = query.find(ExerciseDocument.date <= date_to)
        query = query.sort([
            ("date", SortDirection.ASCENDING),
            ("_id", SortDirection.ASCENDING),
        ])
        if limit is not None:
            query = query.limit(limit)

        try:
            exercises = await query.to_list()
        except PyMongoError as e:
            logger.error(f"Failed to query exercises for user {user_id}: {e}")
            raise PersistenceError(detail=str(e)) from e
        return [_exercise_record(ex) for ex in exercises]
