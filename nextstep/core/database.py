from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from nextstep.core.config import DATABASE_URL

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


import nextstep.profiles.models
import nextstep.goals.models
import nextstep.intake.models
import nextstep.notices.models
import nextstep.site.models
