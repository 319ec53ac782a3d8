from studentdb.db.engine import get_engine
from studentdb.db.schema import bootstrap_schema

def main():
    engine = get_engine()
    bootstrap_schema(engine)
    print("DB schema created.")

if __name__ == "__main__":
    main()
