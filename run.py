#!/usr/bin/env python3
"""招聘工作流客户端启动脚本"""

import sys
from pathlib import Path

# 添加项目根目录到Python路径
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

if __name__ == "__main__":
    from recruit_client.main import main
    main()
