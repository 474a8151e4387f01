# client_echo.py
import socket, sys, traceback

PORT = 6000
PROMPT = "Enter text: "
QUIT = "quit"


def resolve_host():
    return socket.gethostbyname(socket.gethostname())


def session(sock, read_line=None):
    """Send operator lines to the server and print each echoed reply.

    Stops on the quit sentinel (any case) or end of operator input; the
    sentinel itself is never sent. Raises ConnectionError if the server
    closes the stream before answering.
    """
    read_line = read_line or input
    with sock.makefile("r", encoding="utf-8", errors="replace", newline="\n") as rfile, \
         sock.makefile("w", encoding="utf-8", newline="\n") as wfile:
        while True:
            try:
                line = read_line(PROMPT)
            except EOFError:
                break
            if line.lower() == QUIT:
                break
            wfile.write(line + "\n")
            wfile.flush()
            resp = rfile.readline()
            if not resp:
                raise ConnectionError("server closed the connection")
            resp = resp.rstrip("\r\n")
            print(f"Server response: {resp}")


def main():
    print("Simple echo client")
    try:
        print("Waiting for connection...")
        host = resolve_host()
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.connect((host, PORT))
            print("Connected to server")
            session(s)
    except OSError:
        traceback.print_exc()
        return 1
    except KeyboardInterrupt:
        print("\nBye")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
