# scripts/seed_data.py
"""Seed demo dorms, rooms, users and a week of access logs."""
import asyncio
import random
import sys
from datetime import UTC, datetime, timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlmodel import SQLModel

from occupeye.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from occupeye.app.use_cases.access import next_action_after
from occupeye.depends import AsyncSessionLocal, engine
from occupeye.domain.entities import AccessAction, Dorm, RfidLog, Room, User, UserRole

DORMS = [
    {"id": "dorm-a", "name": "Building A", "location": "North Campus", "capacity": 40},
    {"id": "dorm-b", "name": "Building B", "location": "South Campus", "capacity": 30},
]

STUDENTS = [
    ("2024001", "John", "Smith", "Building A"),
    ("2024002", "Maria", "Garcia", "Building A"),
    ("2024003", "David", "Lee", "Building B"),
    ("2024004", "Sarah", "Johnson", "Building B"),
]


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    rng = random.Random(42)

    async with AsyncSessionLocal() as session:
        async with SqlAlchemyUnitOfWork(session) as uow:
            if await uow.dorms.get_by_id("dorm-a"):
                print("Demo data already present, nothing to do")
                return

            for dorm in DORMS:
                await uow.dorms.create(Dorm(**dorm))
                for number in range(1, 6):
                    await uow.rooms.create(
                        Room(
                            id=f"{dorm['id']}-{number:02d}",
                            name=f"Room {number}",
                            building=dorm["name"],
                            dorm_id=dorm["id"],
                            capacity=2,
                        )
                    )

            await uow.users.create(
                User(first_name="Ada", last_name="Admin", email="admin@occupeye.local", role=UserRole.admin)
            )
            await uow.users.create(
                User(
                    first_name="Mark",
                    last_name="Manager",
                    email="manager@occupeye.local",
                    role=UserRole.manager,
                    manager_id="00001",
                    rfid_card="RFID-M-00001",
                    managed_dorm_id="dorm-a",
                    managed_buildings=["Building A"],
                )
            )

            now = datetime.now(UTC)
            for index, (student_id, first_name, last_name, building) in enumerate(STUDENTS):
                room = f"Room {index + 1}"
                await uow.users.create(
                    User(
                        first_name=first_name,
                        last_name=last_name,
                        email=f"{first_name.lower()}.{last_name.lower()}@occupeye.local",
                        student_id=student_id,
                        rfid_card=f"RFID-{student_id}",
                        assigned_room=room,
                        assigned_building=building,
                        room_application_status="approved",
                    )
                )

                # Alternating history over the past week, oldest first
                action = AccessAction.entry
                moments = sorted(now - timedelta(minutes=rng.randint(60, 7 * 24 * 60)) for _ in range(10))
                for moment in moments:
                    await uow.rfid_logs.create(
                        RfidLog(
                            student_id=student_id,
                            student_name=f"{first_name} {last_name}",
                            room=room,
                            building=building,
                            dorm_name=building,
                            action=action,
                            timestamp=moment,
                        )
                    )
                    action = next_action_after(action)

            await uow.commit()

    print("Seeded dorms:", [d["name"] for d in DORMS])
    print("Seeded students:", [s[0] for s in STUDENTS])


if __name__ == "__main__":
    asyncio.run(seed())
