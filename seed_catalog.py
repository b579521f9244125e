# seed_catalog.py
import argparse
import json
import sys

from config import get_config
from database.mongodb import MongoDB
from exceptions import DataIntegrityError
from models.catalog import Question
from questions.catalog_questions import QUESTIONS


def load_documents(path=None):
    if not path:
        return QUESTIONS
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def validate_catalog(documents):
    """
    Check the catalog can be loaded and that option ids are unique across it.
    Returns the parsed questions.
    """
    questions = [Question.from_document(doc) for doc in documents]

    seen_questions = set()
    seen_options = set()
    for question in questions:
        if question.question_id in seen_questions:
            raise DataIntegrityError(f"Duplicate question id {question.question_id!r}")
        seen_questions.add(question.question_id)

        if not question.options:
            raise DataIntegrityError(f"Question {question.question_id!r} has no options")

        for option in question.options:
            if option.option_id in seen_options:
                raise DataIntegrityError(f"Duplicate option id {option.option_id!r}")
            seen_options.add(option.option_id)

    return questions


def seed_catalog(documents, mongo):
    mongo.init_database()

    questions_collection = mongo.get_questions_collection()
    deleted = questions_collection.delete_many({}).deleted_count
    questions_collection.insert_many([dict(doc) for doc in documents])
    return deleted


def main(argv=None):
    parser = argparse.ArgumentParser(description="Load the vocational test questions into MongoDB")
    parser.add_argument('--file', help="JSON file with the questions (defaults to the built-in catalog)")
    parser.add_argument('--dry-run', action='store_true', help="Only validate the catalog")
    args = parser.parse_args(argv)

    try:
        documents = load_documents(args.file)
        questions = validate_catalog(documents)
    except (OSError, ValueError, DataIntegrityError) as e:
        print(f"❌ Invalid catalog: {e}")
        return 1

    option_count = sum(len(q.options) for q in questions)
    print(f"📊 Catalog has {len(questions)} questions and {option_count} options")

    if args.dry_run:
        print("✅ Catalog is valid (dry run, nothing written)")
        return 0

    try:
        config_class = get_config()
        mongo = MongoDB.get_instance(config_class)
        print("🔗 Connecting to MongoDB...")
        mongo.ping()
        deleted = seed_catalog(documents, mongo)
    except Exception as e:
        print(f"❌ Error seeding catalog: {e}")
        return 1

    print(f"🗑️  Replaced {deleted} existing questions")
    print(f"✅ Inserted {len(questions)} questions")
    return 0


if __name__ == "__main__":
    print("=" * 60)
    print("🔧 Vocational Test Catalog Seeder")
    print("=" * 60)

    sys.exit(main())
