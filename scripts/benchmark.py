import time
import json
from pathlib import Path

from wordsmith.pipeline.components import ComponentPipeline

chunk = "Some text @break @info note @assets_path/a.png @endinfo @themes_path/f.ttf\n"
text = chunk * 20000
pipeline = ComponentPipeline({"assets_path": "/p/assets", "themes_path": "/p/themes"})

start = time.perf_counter()
pipeline.compile_all(text)
end = time.perf_counter()

out = {
    "input_chars": len(text),
    "total_seconds": end - start
}

Path("benchmarks/results").mkdir(parents=True, exist_ok=True)
Path("benchmarks/results/run.json").write_text(
    json.dumps(out, indent=2),
    encoding="utf-8",
)
print("Benchmark written.")
