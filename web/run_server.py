"""
웹 서버 실행 스크립트
백엔드 API 서버를 시작합니다.
"""

import argparse

import uvicorn


def main():
    parser = argparse.ArgumentParser(description="Round Robin Scheduler Simulator - web server")
    parser.add_argument('--host', default='0.0.0.0')
    parser.add_argument('--port', type=int, default=8000)
    parser.add_argument('--reload', action='store_true')
    args = parser.parse_args()

    print("=" * 60)
    print("  Round Robin Scheduler Simulator - web server")
    print("=" * 60)
    print(f"API docs: http://localhost:{args.port}/docs")
    print("Press Ctrl+C to stop.")
    print("-" * 60)

    uvicorn.run('web.backend.app:app', host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
