"""A minimal threaded TCP server that answers every request, and a client for it."""

import socket
import threading

BUFFER_SIZE = 1024
RESPONSE = b"HTTP/1.1 200 OK\r\n\r\nHello, World!"


def _request(host: str, port: int) -> bytes:
    return (
        f"GET / HTTP/1.1\r\nHost: {host}:{port}\r\nConnection: keep-alive\r\n"
        "The phone rings...\nbut nobody came\r\n\r\n"
    ).encode()


def handle_connection(conn: socket.socket) -> str:
    """Read one request from ``conn``, print it, send the fixed reply; return the request text."""
    data = conn.recv(BUFFER_SIZE)
    text = data.decode("utf-8", errors="replace")
    print(f"Received: {text!r}")
    conn.sendall(RESPONSE)
    return text


def _serve(conn: socket.socket) -> None:
    with conn:
        handle_connection(conn)


def server(host: str = "0.0.0.0", port: int = 8080) -> None:
    """Accept connections forever, answering each on its own thread."""
    with socket.create_server((host, port)) as listener:
        print(f"Listening on http://127.0.0.1:{port}")
        while True:
            try:
                conn, _ = listener.accept()
            except OSError as exc:
                print(f"Error: {exc}")
                continue
            threading.Thread(target=_serve, args=(conn,), daemon=True).start()


def client(host: str = "127.0.0.1", port: int = 8080) -> str:
    """Send one request to the server, print and return its reply."""
    with socket.create_connection((host, port)) as conn:
        conn.sendall(_request(host, port))
        data = conn.recv(BUFFER_SIZE)
    text = data.decode("utf-8", errors="replace")
    print(f"Response: {text!r}")
    return text