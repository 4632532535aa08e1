"""招聘工作流客户端命令行入口"""

import asyncio
import argparse
import json
from pathlib import Path

from pydantic import ValidationError

from .core.candidate_presenter import CandidateView, present_candidate
from .integrations.recruitment_api import close_recruitment_api
from .models.resume import ResumeFile
from .services.job_creation import JobCreationFlow
from .services.resume_submission import ResumeSubmissionFlow
from .utils.logger import app_logger


def print_candidate(view: CandidateView):
    """打印候选人展示数据"""
    print(f"[{view.initial}] {view.name}")
    print(f"得分: {view.score_label} ({view.tier.value})")
    print(f"邮箱: {view.email}")
    if view.phone:
        print(f"电话: {view.phone}")
    print(f"上传时间: {view.uploaded_at}")
    print(f"工作年限: {view.experience_years:g}")
    print(f"技能({len(view.skills)}): {', '.join(view.skills)}")
    print(f"证书: {', '.join(view.certifications) or 'No certifications listed'}")
    for item in view.explanation:
        print(f"  - {item}")
    if view.has_document:
        print(f"简历文件: {view.document_url}")


async def cli_list_jobs(args):
    """命令行查看岗位列表"""
    flow = ResumeSubmissionFlow()
    try:
        await flow.load_jobs()
        if not flow.jobs:
            print("暂无岗位")
            return
        for job_id, label in flow.job_options():
            print(f"{job_id}\t{label}")
    finally:
        await close_recruitment_api()


async def cli_create_job(args):
    """命令行创建岗位"""
    flow = JobCreationFlow()
    flow.add_callback("job_added", lambda job: print(f"岗位创建成功: {job.title} (ID: {job.id})"))

    try:
        flow.open()
        flow.title = args.title
        flow.description = args.description
        flow.requirements = args.requirements

        try:
            result = await flow.submit()
        except ValidationError as e:
            print(f"表单校验失败: {e.error_count()}个字段不合法")
            return

        if result.is_error:
            print(f"创建岗位失败: {result.message}")
    finally:
        await close_recruitment_api()


async def cli_upload_resume(args):
    """命令行上传简历"""
    flow = ResumeSubmissionFlow()

    try:
        await flow.load_jobs()
        flow.select_job(args.job_id)

        resume_file = ResumeFile.from_path(args.file)
        if flow.attach_file(resume_file) is None:
            print(f"不支持的文件类型: {resume_file.content_type}")
            return
        if resume_file.exceeds_size_limit:
            print(f"提示: 文件较大 ({resume_file.size_label})")

        result = await flow.submit()
        print(result.message)

        if result.is_success and isinstance(result.payload, dict) and result.payload.get("name"):
            try:
                print_candidate(present_candidate(result.payload))
            except ValidationError as e:
                app_logger.warning(f"返回数据无法展示为候选人: {str(e)}")
    finally:
        await close_recruitment_api()


def cli_show_candidate(args):
    """命令行展示候选人评分(JSON文件)"""
    data = json.loads(Path(args.path).read_text(encoding="utf-8"))
    print_candidate(present_candidate(data))


def main():
    """主函数"""
    parser = argparse.ArgumentParser(description="招聘工作流客户端")
    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    subparsers.add_parser("jobs", help="查看岗位列表")

    job_parser = subparsers.add_parser("create-job", help="创建岗位")
    job_parser.add_argument("title", help="岗位标题")
    job_parser.add_argument("--description", default="", help="岗位描述")
    job_parser.add_argument("--requirements", default="", help="岗位要求")

    upload_parser = subparsers.add_parser("upload", help="上传简历并评分")
    upload_parser.add_argument("job_id", help="岗位ID")
    upload_parser.add_argument("file", help="简历文件路径(PDF/DOCX/JPG)")

    candidate_parser = subparsers.add_parser("candidate", help="展示候选人评分")
    candidate_parser.add_argument("path", help="候选人JSON文件")

    args = parser.parse_args()

    if args.command == "jobs":
        asyncio.run(cli_list_jobs(args))
    elif args.command == "create-job":
        asyncio.run(cli_create_job(args))
    elif args.command == "upload":
        asyncio.run(cli_upload_resume(args))
    elif args.command == "candidate":
        cli_show_candidate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
