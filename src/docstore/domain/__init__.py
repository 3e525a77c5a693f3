"""Domain layer - documents, clauses and the query engine stages."""
