"""CLI trigger: read a prompt or list filter from argv, run the matching tool, print JSON."""
import json
import sys
import uuid

from skillscout.config import skills_file_path
from skillscout.logging_utils import clear_trace_id, set_trace_id
from skillscout.skills import RegistryLoadError, SkillEngine, load_registry
from skillscout.tools import ToolRegistry, build_tool_registry

USAGE = (
    'Usage: python main.py recommend "your prompt"  |  '
    "python main.py list [--min N] [--max N]  |  python main.py tools"
)


def build_engine() -> SkillEngine:
    """Engine over SKILLSCOUT_SKILLS_FILE when set, else the bundled keyword table."""
    path = skills_file_path()
    if path is None:
        return SkillEngine()
    return SkillEngine(load_registry(path))


def parse_list_args(argv: list[str]) -> dict[str, float]:
    """Parse --min/--max (also --min-priority/--max-priority) into list_skills arguments."""
    flags = {
        "--min": "minPriority",
        "--min-priority": "minPriority",
        "--max": "maxPriority",
        "--max-priority": "maxPriority",
    }
    args: dict[str, float] = {}
    i = 0
    while i < len(argv):
        key = flags.get(argv[i])
        if key is None or i + 1 >= len(argv):
            raise ValueError(f"Unexpected argument: {argv[i]}")
        try:
            value = float(argv[i + 1])
        except ValueError:
            raise ValueError(f"{argv[i]} expects a number, got {argv[i + 1]!r}") from None
        args[key] = int(value) if value.is_integer() else value
        i += 2
    return args


def run_cli(argv: list[str] | None = None, tools: ToolRegistry | None = None) -> int:
    """Entry for CLI: argv is [command, ...]. Returns the process exit code."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(USAGE, file=sys.stderr)
        return 1
    cmd, rest = argv[0].lower(), argv[1:]

    if cmd == "recommend":
        # When invoked as "python main.py recommend <prompt>", the prompt may span several args
        if rest:
            prompt = " ".join(rest)
        else:
            prompt = sys.stdin.read()
        tool_name, arguments = "recommend_skills", {"prompt": prompt}
    elif cmd == "list":
        try:
            arguments = parse_list_args(rest)
        except ValueError as e:
            print(f"{e}\n{USAGE}", file=sys.stderr)
            return 1
        tool_name = "list_skills"
    elif cmd == "tools":
        tool_name, arguments = "", {}
    else:
        print(f"Unknown command: {cmd}\n{USAGE}", file=sys.stderr)
        return 1

    if tools is None:
        try:
            tools = build_tool_registry(build_engine())
        except RegistryLoadError as e:
            print(str(e), file=sys.stderr)
            return 1
    if cmd == "tools":
        print(json.dumps(tools.definitions(), ensure_ascii=False, indent=2))
        return 0

    set_trace_id(str(uuid.uuid4()))
    try:
        result = tools.execute(tool_name, arguments)
    finally:
        clear_trace_id()
    if result.startswith("Error:") or result.startswith("Unknown tool:"):
        print(result, file=sys.stderr)
        return 1
    print(result)
    return 0
