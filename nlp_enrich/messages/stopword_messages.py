# nlp_enrich/messages/stopword_messages.py

# ✅ Positive
ENRICHER_STARTED = "Stop-word enricher started."
ENRICHER_STOPPED = "Stop-word enricher stopped."
PIPELINE_STARTED = "Token pipeline started."
PIPELINE_STOPPED = "Token pipeline stopped."

# ❌ Errors
RESOURCE_NOT_FOUND = "Stop-word resource not found for language '{language}'."
RESOURCE_UNREADABLE = "Stop-word resource for language '{language}' could not be read."
RESOURCE_EMPTY = "Stop-word resource for language '{language}' contains no words."
NLTK_CORPUS_MISSING = (
    "NLTK stopwords corpus is not installed. "
    "Run nltk.download('stopwords') or set NLTK_AUTO_DOWNLOAD=true."
)
UNKNOWN_SOURCE = "Unknown stop-word source '{name}'."
MODEL_CONFIG_REQUIRED = "A model configuration is required."
ENRICHER_NOT_STARTED = "Stop-word enricher used before on_start() completed."
PIPELINE_NOT_STARTED = "Token pipeline used before start() completed."
INVALID_MIN_TOKEN_LEN = "min_token_len must be >= 1, got {value}."
