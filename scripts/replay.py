#!/usr/bin/env python3
"""CLI for ghost-canvas."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ghost_canvas import GhostCanvas, GhostCanvasError, load_config
from ghost_canvas.logging_config import setup_logging
from ghost_canvas.models import Stroke


async def replay_file(canvas: GhostCanvas, gestures: list[dict]) -> int:
    """제스처 목록을 순서대로 캔버스에 넘기고 모든 재생이 끝날 때까지 대기.

    Returns:
        발행된 스냅샷 수
    """
    published = 0

    def on_snapshot(snapshot):
        nonlocal published
        published += 1
        print(f"  스냅샷 #{published}: {snapshot.width}x{snapshot.height}")

    unsubscribe = canvas.subscribe(on_snapshot)
    try:
        for gesture in gestures:
            canvas.select_tool(gesture.get("tool", canvas.selected_tool.name))
            stroke = Stroke.from_path_data(gesture["points"])
            for timed in stroke.points:
                canvas.drag_changed(timed.point.x, timed.point.y, timed.timestamp)
            canvas.drag_ended()

        await canvas.wait_idle()
    finally:
        unsubscribe()

    return published


def main():
    parser = argparse.ArgumentParser(description="제스처 파일의 스트로크를 고스트 캔버스에 재생")
    parser.add_argument("gestures", help='제스처 JSON 파일 ([{"tool": "red", "points": [[x, y, t], ...]}])')
    parser.add_argument("--config", help="캔버스 설정 JSON 파일")
    parser.add_argument("--size", nargs=2, type=float, default=(320.0, 320.0), metavar=("W", "H"), help="컨테이너 크기")
    parser.add_argument("--scale", type=float, default=1.0, help="디스플레이 배율")
    parser.add_argument("--verbose", action="store_true", help="디버그 로그 출력")

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    gestures_path = Path(args.gestures)
    if not gestures_path.is_file():
        print(f"오류: {gestures_path}를 찾을 수 없습니다.")
        sys.exit(1)

    try:
        gestures = json.loads(gestures_path.read_text(encoding="utf-8"))
        canvas = GhostCanvas(load_config(args.config))
    except (json.JSONDecodeError, GhostCanvasError) as e:
        print(f"오류: {e}")
        sys.exit(1)

    width, height = args.size
    canvas.layout(width, height, args.scale)

    print(f"재생 중: {gestures_path.name} ({len(gestures)}개 스트로크)")
    try:
        published = asyncio.run(replay_file(canvas, gestures))
    except (KeyError, IndexError, ValueError, TypeError, GhostCanvasError) as e:
        print(f"오류: 잘못된 제스처 데이터 ({e})")
        sys.exit(1)
    print(f"\n완료! 스냅샷 {published}개 발행")


if __name__ == "__main__":
    main()
