"""
Nomes das coleções do Firestore (schema-in-code).

O Firestore não tem DDL nem migrations: as coleções surgem na primeira
escrita. Estas constantes são a única fonte dos nomes.
"""

COLLECTION_OFFICES = "offices"
COLLECTION_USERS = "users"
COLLECTION_CLIENTS = "clients"
COLLECTION_PROCESSES = "processes"
COLLECTION_EVENTS = "events"
COLLECTION_FINANCIAL_TASKS = "financial_tasks"
COLLECTION_DOCUMENT_TEMPLATES = "document_templates"
COLLECTION_CONTACT_REQUESTS = "contact_requests"

# Subcoleções de processes/{id}
SUBCOLLECTION_DOCUMENTS = "documents"
SUBCOLLECTION_CHAT_MESSAGES = "chatMessages"


def process_subcollection(process_id: str, name: str) -> str:
    """Caminho de uma subcoleção de processo (ex: processes/abc/documents)."""
    return f"{COLLECTION_PROCESSES}/{process_id}/{name}"
