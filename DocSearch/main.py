import logging

from rich.console import Console
from rich.panel import Panel

from .config import load_config
from .display import print_documents, print_match_result
from .preprocessing.document import DocumentStatus
from .search_server import SearchServer

SAMPLE_DOCUMENTS = [
    (0, "white cat and fashionable collar", DocumentStatus.ACTUAL, [8, -3]),
    (1, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7]),
    (2, "groomed dog expressive eyes", DocumentStatus.ACTUAL, [5, -12, 2, 1]),
    (3, "groomed starling evgeny", DocumentStatus.BANNED, [9]),
]

SAMPLE_QUERIES = [
    "fluffy groomed cat",
    "fluffy groomed -tail",
]


def main():
    config = load_config()
    logging.basicConfig(level=config.get("logging", {}).get("level", "WARNING"))

    console = Console()
    console.print(Panel("[bold blue]DocSearch[/bold blue] [yellow]demo[/yellow]", border_style="blue", width=80))

    server = SearchServer(stop_words="and in on", config=config)
    for document_id, text, status, ratings in SAMPLE_DOCUMENTS:
        server.add_document(document_id, text, status, ratings)
    console.print(f"Indexed [bold]{server.document_count()}[/bold] documents")

    for query in SAMPLE_QUERIES:
        print_documents(server.find_top_documents(query), console=console, title=f"ACTUAL: {query}")

    print_documents(
        server.find_top_documents(SAMPLE_QUERIES[0], DocumentStatus.BANNED),
        console=console,
        title=f"BANNED: {SAMPLE_QUERIES[0]}"
    )
    print_documents(
        server.find_top_documents(SAMPLE_QUERIES[0], lambda document_id, status, rating: document_id % 2 == 0),
        console=console,
        title=f"Even ids: {SAMPLE_QUERIES[0]}"
    )

    for document_id in server:
        words, status = server.match_document(SAMPLE_QUERIES[1], document_id)
        console.print(f"Document {document_id}: ", end="")
        print_match_result(words, status, console=console)


if __name__ == "__main__":
    main()
