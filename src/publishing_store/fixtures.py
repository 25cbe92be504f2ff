"""Fixture data seeded into a fresh store.

Relations are stored as foreign keys only; nested author and biography
objects are attached at read time by the relation enricher.
"""

from __future__ import annotations

from publishing_store.collection_store import CollectionStore

PROJECTS = [
    {
        "id": "1",
        "title": "Die Kunst des Schreibens",
        "subtitle": "Ein Leitfaden für angehende Autoren",
        "description": "Ein umfassender Leitfaden für angehende Autoren, der alle Aspekte des kreativen Schreibprozesses abdeckt.",
        "cover_image": "https://images.unsplash.com/photo-1544947950-fa07a98d237f?w=800&q=80",
        "languages": ["Deutsch"],
        "genres": ["non-fiction.writing", "education"],
        "series": "series-1",
        "publisher": "Selbstverlag",
        "publisher_id": "verlag-1",
        "created_at": "2023-01-15T10:30:00Z",
        "updated_at": "2023-06-20T14:45:00Z",
        "user_id": "user-1",
        "target_audience": "Angehende Autoren und Schriftsteller",
        "target_audience_groups": ["Erwachsene", "Studenten"],
        "slogan": "Schreiben wie die Profis",
        "selling_points": "Praxisnahe Übungen, Expertentipps, Leicht verständliche Erklärungen",
        "keywords": "Schreiben, Kreatives Schreiben, Autorenleitfaden",
    },
    {
        "id": "2",
        "title": "Der Weg zum Bestseller",
        "subtitle": "Vom Manuskript zum Erfolg",
        "description": "Ein praktischer Ratgeber für Autoren, die ihre Werke erfolgreich vermarkten möchten.",
        "cover_image": "https://images.unsplash.com/photo-1589998059171-988d887df646?w=800&q=80",
        "languages": ["Deutsch", "English"],
        "genres": ["non-fiction.marketing", "business"],
        "series": None,
        "publisher": "Verlag XYZ",
        "publisher_id": "verlag-2",
        "created_at": "2023-02-10T09:15:00Z",
        "updated_at": "2023-07-05T11:20:00Z",
        "user_id": "user-1",
        "target_audience": "Autoren mit fertigem Manuskript",
        "target_audience_groups": ["Erwachsene", "Fachpublikum"],
        "slogan": "Vom Manuskript zum Bestseller",
        "selling_points": "Marketingstrategien, Verlagskontakte, Selbstvermarktung",
        "keywords": "Buchmarketing, Verlag, Selfpublishing",
    },
    {
        "id": "3",
        "title": "Digitales Publizieren Meistern",
        "subtitle": "Der komplette Leitfaden für Self-Publisher",
        "description": "Ein vollständiger Leitfaden für Autoren, die ihre Bücher digital und im Print-on-Demand veröffentlichen möchten.",
        "cover_image": "https://images.unsplash.com/photo-1481627834876-b7833e8f5570?w=800&q=80",
        "languages": ["Deutsch"],
        "genres": ["non-fiction.publishing", "business", "education"],
        "series": "series-1",
        "publisher": "Eigenverlag Premium",
        "publisher_id": "verlag-1",
        "created_at": "2023-08-01T10:00:00Z",
        "updated_at": "2023-12-15T16:30:00Z",
        "user_id": "user-1",
        "target_audience": "Angehende Self-Publisher und erfahrene Autoren",
        "target_audience_groups": ["Erwachsene", "Fachpublikum", "Unternehmer"],
        "slogan": "Vom Manuskript zum Marktführer",
        "selling_points": "Schritt-für-Schritt Anleitung, Praxiserprobte Strategien, Insider-Tipps",
        "keywords": "Self-Publishing, Digitales Publizieren, Buchvermarktung, Print-on-Demand, E-Book",
    },
]

EDITIONS = [
    {
        "id": "1",
        "project_id": "1",
        "title": "Standardausgabe",
        "produktform": "Softcover",
        "ausgabenart": None,
        "price": 24.99,
        "pages": 320,
        "status": "Ready",
        "isbn": "978-3-123456-78-9",
        "is_complete": True,
        "content_file": "content.pdf",
        "cover_file": "cover.jpg",
        "paper_type": "textdruck-weiss",
        "cover_finish": "matt",
        "spine_type": "gerade",
        "enable_sample_reading": True,
    },
    {
        "id": "2",
        "project_id": "1",
        "title": "Premium Edition",
        "produktform": "Hardcover",
        "ausgabenart": "Special Edition",
        "price": 39.99,
        "pages": 320,
        "status": "Ready",
        "isbn": "978-3-123456-79-6",
        "is_complete": True,
        "content_file": "content.pdf",
        "cover_file": "cover-premium.jpg",
        "paper_type": "premium-weiss",
        "cover_finish": "glanz",
        "spine_type": "rund",
        "enable_sample_reading": True,
    },
    {
        "id": "3",
        "project_id": "1",
        "title": "Digitale Ausgabe",
        "produktform": "E-Book",
        "price": 14.99,
        "pages": 320,
        "status": "Draft",
        "isbn": None,
        "is_complete": False,
        "content_file": "content.epub",
        "cover_file": None,
        "enable_sample_reading": True,
    },
    {
        "id": "4",
        "project_id": "2",
        "title": "Standardausgabe",
        "produktform": "Softcover",
        "ausgabenart": None,
        "price": 19.99,
        "pages": 240,
        "status": "Draft",
        "isbn": None,
        "is_complete": False,
    },
    {
        "id": "5",
        "project_id": "3",
        "title": "Vollständige Ausgabe",
        "produktform": "Softcover",
        "ausgabenart": "Standardausgabe",
        "price": 29.99,
        "pages": 450,
        "status": "Veröffentlicht",
        "isbn": "978-3-987654-32-1",
        "is_complete": True,
        "publication_date": "2023-12-01T00:00:00Z",
        "distribution_channels": ["Amazon", "Thalia", "Hugendubel", "Eigenvertrieb"],
        "author_royalty_rate": 0.15,
    },
    {
        "id": "6",
        "project_id": "3",
        "title": "Premium Hardcover Edition",
        "produktform": "Hardcover",
        "ausgabenart": "Sonderedition",
        "price": 49.99,
        "pages": 450,
        "status": "Im Verkauf",
        "isbn": "978-3-987654-33-8",
        "is_complete": True,
        "publication_date": "2023-12-15T00:00:00Z",
        "distribution_channels": ["Amazon", "Buchhandel", "Eigenvertrieb"],
        "author_royalty_rate": 0.2,
        "special_features": "Goldprägung, Lesebändchen, Schutzumschlag",
    },
]

AUTHORS = [
    {"id": "1", "first_name": "Maria", "last_name": "Schmidt", "author_type": "person", "is_pseudonym": False,
     "birth_date": "1975-03-15", "profession": "Autorin und Schreibcoach", "website": "www.mariaschreibt.de"},
    {"id": "2", "first_name": "Thomas", "last_name": "Weber", "author_type": "person", "is_pseudonym": False,
     "birth_date": "1982-07-22", "profession": "Lektor und Autor", "website": "www.thomasweber-autor.de"},
    {"id": "3", "company_name": "Literaturverlag GmbH", "author_type": "organization", "is_pseudonym": False},
    {"id": "4", "first_name": "Julia", "last_name": "Müller", "author_type": "person", "is_pseudonym": False,
     "birth_date": "1988-11-05", "profession": "Marketingexpertin und Buchautorin"},
    {"id": "5", "first_name": "Michael", "last_name": "Becker", "author_type": "person", "is_pseudonym": True,
     "birth_date": "1970-09-18", "profession": "Verleger und Autor"},
    {"id": "6", "company_name": "Buchmarketing Institut", "author_type": "organization", "is_pseudonym": False},
    {"id": "7", "first_name": "Dr. Sarah", "last_name": "Hoffmann", "author_type": "person", "is_pseudonym": False,
     "birth_date": "1985-04-12", "profession": "Verlagsexpertin und Digitalisierungsberaterin",
     "awards": "Deutscher Verlagspreis 2022, Innovationspreis Digitales Publizieren 2023"},
]

AUTHOR_BIOGRAPHIES = [
    {"id": "bio-1", "author_id": "1", "biography_label": "Standard", "language": "de",
     "biography_text": "Maria Schmidt ist eine erfahrene Autorin und Schreibcoach mit über 15 Jahren Erfahrung in der Verlagsbranche."},
    {"id": "bio-2", "author_id": "2", "biography_label": "Standard", "language": "de",
     "biography_text": "Thomas Weber hat als Lektor bei mehreren großen Verlagen gearbeitet und teilt sein Wissen über den Publikationsprozess."},
    {"id": "bio-3", "author_id": "3", "biography_label": "Standard", "language": "de",
     "biography_text": "Die Literaturverlag GmbH ist ein renommierter Verlag für Fachliteratur im Bereich Schreiben und Publizieren."},
    {"id": "bio-4", "author_id": "4", "biography_label": "Standard", "language": "de",
     "biography_text": "Julia Müller ist eine Expertin für Buchmarketing mit langjähriger Erfahrung in der Verlagsbranche."},
    {"id": "bio-5", "author_id": "5", "biography_label": "Standard", "language": "de",
     "biography_text": "Michael Becker (Pseudonym) ist ein erfahrener Verleger, der sein Insiderwissen über die Verlagsbranche teilt."},
    {"id": "bio-6", "author_id": "6", "biography_label": "Standard", "language": "de",
     "biography_text": "Das Buchmarketing Institut ist eine führende Einrichtung für die Ausbildung und Beratung im Bereich Buchvermarktung."},
    {"id": "bio-7", "author_id": "7", "biography_label": "Standard", "language": "de",
     "biography_text": "Dr. Sarah Hoffmann ist eine renommierte Verlagsexpertin und Digitalisierungsberaterin mit über 10 Jahren Erfahrung in der Branche."},
]

PROJECT_AUTHORS = [
    {"id": "1", "project_id": "1", "author_id": "1", "biography_id": "bio-1", "author_role": "Autor", "display_order": 0},
    {"id": "2", "project_id": "1", "author_id": "2", "biography_id": "bio-2", "author_role": "Co-Autor", "display_order": 1},
    {"id": "3", "project_id": "1", "author_id": "3", "biography_id": "bio-3", "author_role": "Herausgeber", "display_order": 2},
    {"id": "4", "project_id": "2", "author_id": "4", "biography_id": "bio-4", "author_role": "Autor", "display_order": 0},
    {"id": "5", "project_id": "2", "author_id": "5", "biography_id": "bio-5", "author_role": "Co-Autor", "display_order": 1},
    {"id": "6", "project_id": "2", "author_id": "6", "biography_id": "bio-6", "author_role": "Fachliche Beratung", "display_order": 2},
    {"id": "7", "project_id": "3", "author_id": "7", "biography_id": "bio-7", "author_role": "Hauptautor", "display_order": 0},
]

SERIES = [
    {"id": "series-1", "name": "Schreiben & Publizieren", "description": "Eine Buchreihe für angehende Autoren", "project_count": 2},
    {"id": "series-2", "name": "Marketing für Autoren", "description": "Alles über die Vermarktung von Büchern", "project_count": 0},
]

PUBLISHERS = [
    {"id": "verlag-1", "name": "Beispiel Verlag", "description": "Ein Beispielverlag für die Demonstration der Plattform.",
     "website": "https://beispielverlag.de", "contact_email": "kontakt@beispielverlag.de",
     "created_at": "2024-01-10T14:00:00Z", "updated_at": "2024-01-10T14:00:00Z"},
    {"id": "verlag-2", "name": "Literatur Verlag", "description": "Spezialisiert auf literarische Werke und Belletristik.",
     "website": "https://literaturverlag.de", "contact_email": "info@literaturverlag.de",
     "created_at": "2024-01-11T09:30:00Z", "updated_at": "2024-01-11T09:30:00Z"},
    {"id": "verlag-3", "name": "Wissenschaftsverlag", "description": "Fachverlag für wissenschaftliche Publikationen.",
     "website": "https://wissenschaftsverlag.de", "contact_email": "redaktion@wissenschaftsverlag.de",
     "created_at": "2024-01-12T16:45:00Z", "updated_at": "2024-01-12T16:45:00Z"},
    {"id": "verlag-4", "name": "Kinderbuchverlag", "description": "Spezialisiert auf Kinder- und Jugendbücher.",
     "website": "https://kinderbuchverlag.de", "contact_email": "lektorat@kinderbuchverlag.de",
     "created_at": "2024-01-13T11:20:00Z", "updated_at": "2024-01-13T11:20:00Z"},
]

FIXTURES: dict[str, list[dict]] = {
    "projects": PROJECTS,
    "editions": EDITIONS,
    "authors": AUTHORS,
    "author_biographies": AUTHOR_BIOGRAPHIES,
    "project_authors": PROJECT_AUTHORS,
    "series": SERIES,
    "publishers": PUBLISHERS,
}


def seed_store(store: CollectionStore) -> dict[str, int]:
    """Load every fixture table into ``store`` and return per-table counts."""
    return {table: store.load(table, records) for table, records in FIXTURES.items()}
