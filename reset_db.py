# reset_db.py
import sys

from nextstep.core.database import Base, SessionLocal, engine
from nextstep.profiles.models import Profile, ROLE_ADMIN


def reset_database():
    print("⚠️ Dropping all tables...")
    Base.metadata.drop_all(bind=engine)

    print("🚀 Recreating tables...")
    Base.metadata.create_all(bind=engine)
    print("✅ Tables recreated successfully.")


def promote_admin(user_id: str):
    """Grants the admin role to the profile of an identity, so the console has a first admin."""
    db = SessionLocal()
    try:
        profile = db.query(Profile).filter(Profile.user_id == user_id).first()
        if profile is None:
            print(f"❌ No profile for identity {user_id}; sign in once first.")
            return
        profile.role = ROLE_ADMIN
        db.commit()
        print(f"✅ {user_id} is now an admin.")
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) == 3 and sys.argv[1] == "promote":
        promote_admin(sys.argv[2])
    else:
        reset_database()
