# server_echo.py
import socket, sys, traceback

# All interfaces, like a default server socket, so the resolved local host address reaches it
HOST = "0.0.0.0"
PORT = 6000


def open_listener(host, port):
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        s.bind((host, port))
        s.listen(1)
    except OSError:
        s.close()
        raise
    return s


def echo_lines(conn):
    """Echo every line read from conn back to it until the peer closes."""
    with conn.makefile("r", encoding="utf-8", errors="replace", newline="\n") as rfile, \
         conn.makefile("w", encoding="utf-8", newline="\n") as wfile:
        for line in rfile:
            msg = line.rstrip("\r\n")
            print(f"Server: {msg}", flush=True)
            wfile.write(msg + "\n")
            wfile.flush()


def serve(listener):
    print("Waiting for connection...", flush=True)
    conn, addr = listener.accept()
    with conn:
        print(f"Connected to client {addr[0]}:{addr[1]}", flush=True)
        echo_lines(conn)
    print("Client disconnected", flush=True)


def main():
    print("Simple echo server", flush=True)
    try:
        with open_listener(HOST, PORT) as s:
            serve(s)
    except OSError:
        traceback.print_exc()
        return 1
    except KeyboardInterrupt:
        print("\nShutting down server...")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
