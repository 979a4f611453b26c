"""ETL layer: CSV extraction, normalization and database loading."""
