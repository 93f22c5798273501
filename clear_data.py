"""Clear all hospital records from the database while preserving schema."""
from rescuedge import create_app, db
from rescuedge.models import Hospital

app = create_app()

with app.app_context():
    Hospital.query.delete()
    db.session.commit()
    print("All data cleared from database.")
