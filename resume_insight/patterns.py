"""Keyword lists, regular expressions and dictionaries used by the extractors and metrics.

Order matters wherever a table is consulted first-match-wins: industries,
role buckets, ladders and AI tag priority are all read top to bottom.
"""
from __future__ import annotations
import re

CJK_RANGE = "\u4e00-\u9fff"
CJK_CHAR = re.compile(f"[{CJK_RANGE}]")

PRESENT_TOKENS = ("至今", "现在", "present")
PRESENT_LABEL = {"zh": "至今", "en": "Present"}

CHINESE_NUMERALS = {"一": 1, "二": 2, "三": 3, "四": 4, "五": 5, "六": 6, "七": 7, "八": 8, "九": 9, "十": 10}

PLACEHOLDER_COMPANY = {"zh": "科技公司", "en": "Technology Company"}
PLACEHOLDER_POSITION = {"zh": "软件工程师", "en": "Software Engineer"}
PLACEHOLDER_AFFILIATION = {"zh": "科技行业", "en": "Technology Industry"}
PLACEHOLDER_NAME = {"zh": "候选人", "en": "Candidate"}

# -------- Personal info --------
EMAIL = re.compile(r"[\w.-]+@[\w.-]+\.\w+", re.ASCII)
PHONE = re.compile(
    r"(?:\+?1[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}"
    r"|(?:\+86[-.\s]?)?1[3-9]\d{9}"
    r"|\d{11}"
)
NAME_SKIP_WORDS = ("resume", "résumé", "cv", "curriculum", "简历")
NAME_SKIP_MARKERS = ("@", "年", "经验")
LATIN_NAME = re.compile(r"^[A-Za-z\s]{2,20}$")
HEADING_PREFIX = re.compile(r"^#+\s*")
LINKEDIN = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE | re.ASCII)
GITHUB = re.compile(r"github\.com/[\w-]+", re.IGNORECASE | re.ASCII)
WEBSITE = re.compile(r"https?://(?!(?:www\.)?(?:github|linkedin)\.com)[\w.-]+\.[\w.-]+(?:/[\w.-]*)?", re.IGNORECASE | re.ASCII)
WEBSITE_EXCLUDES = ("github.com", "linkedin.com", "twitter.com", "@")
LABELED_DOMAIN = re.compile(r"(?:portfolio|website|blog)[:：\s]*([a-zA-Z0-9.-]+\.[a-zA-Z]{2,})", re.IGNORECASE)
CHINESE_CITIES = ("深圳", "北京", "上海", "广州", "杭州")
LOCATION = re.compile(
    r"([A-Z][a-z]+,\s*[A-Z]{2}\b)"
    r"|([A-Z][a-z]+\s*[A-Z][a-z]+,\s*[A-Z][a-z]+)"
    r"|" + "|".join(CHINESE_CITIES)
)

# -------- Education --------
EDUCATION_KEYWORDS = re.compile(
    r"university|college|institute|school|bachelor|master|phd|degree|毕业|大学|学院|学士|硕士|博士",
    re.IGNORECASE,
)
DEGREE_LATIN = re.compile(
    r"(?<![A-Za-z])(bachelor(?:'?s)?|master(?:'?s)?|doctor(?:ate)?|phd|ph\.d\.?|mba|b\.?sc?|m\.?sc?|b\.?a|m\.?a)(?![A-Za-z])[^,，;；|\n]*",
    re.IGNORECASE,
)
DEGREE_CJK = re.compile(r"(学士|硕士|博士|本科|研究生)(?:学位)?")
DEGREE_STOP = re.compile(r"\s*(?:\b(?:at|from)\b|\(|（|\d{4}|[A-Z][\w&'.-]*\s+(?:University|College|Institute)).*$")
INSTITUTION_LATIN = re.compile(
    r"(?:[A-Z][\w&'.-]*[ \t]+){0,4}(?:University|College|Institute)(?:[ \t]+of(?:[ \t]+[A-Z][\w&'.-]*)+)?"
)
INSTITUTION_CJK = re.compile(f"(?:毕业于|就读于)?([{CJK_RANGE}]{{2,10}}?(?:大学|学院))")
GRADUATION_YEAR = re.compile(r"(?<!\d)20\d{2}(?!\d)")
MAJOR = (
    re.compile(r"(?:major(?:ed)?\s*(?:in|:)|专业[：:]|主修[：:]?)\s*([^,，;；|\n(（]+)", re.IGNORECASE),
    re.compile(r"\b(?:bachelor|master|degree|b\.?sc?|m\.?sc?)[^,\n]*?\bin\s+([A-Z][A-Za-z &]+?)(?=\s*(?:[,;|(\n]|$|\d{4}|from\b|at\b))", re.IGNORECASE),
)
GPA = re.compile(r"GPA[：:\s]*([0-4]\.\d{1,2})", re.IGNORECASE)

# -------- Work experience --------
STATED_YEARS_ZH = re.compile(
    r"([一二三四五六七八九十\d]+)\s*年(?:以上)?((?:[A-Za-z+#./]+)?(?:前端|后端|全栈|开发|工程师|技术)*)(?:开发|工作)*经验"
)
STATED_YEARS_EN = re.compile(
    r"(\d{1,2})\+?\s*(?:years?|yrs?)\s+(?:of\s+)?((?:[A-Za-z/+#.-]+\s+){0,3}?)experience",
    re.IGNORECASE,
)
STATED_YEARS_PATTERNS = (STATED_YEARS_ZH, STATED_YEARS_EN)

_DATE = r"(\d{4}(?:[./]\d{1,2})?)"
_SEP = r"\s*[-~–]\s*"
DATE_RANGE_PATTERNS = (
    re.compile(_DATE + _SEP + r"(\d{4}(?:[./]\d{1,2})?|至今|现在|present)", re.IGNORECASE),
    re.compile(_DATE + _SEP + _DATE),
    re.compile(r"工作时间[：:]\s*" + _DATE + _SEP + r"(\d{4}(?:[./]\d{1,2})?|至今|现在)"),
    re.compile(r"时间[：:]\s*" + _DATE + _SEP + _DATE),
)
EARLIEST_START_YEAR = 1990
EXPERIENCE_WINDOW = 500

COMPANY_PATTERNS = (
    re.compile(r"([^。\n]*)(有限公司|公司|科技|集团|企业|\bCorporation\b|\bInc\b\.?|\bLtd\b\.?|\bLLC\b|\bCorp\b\.?|\bCo\b\.?)"),
    re.compile(r"###\s*([^（\n]+)"),
)
POSITION_LABEL = re.compile(r"^职位[：:]\s*")
POSITION_PATTERNS = (
    re.compile(r"职位[：:]\s*([^\n]+)"),
    re.compile(r"(前端|后端|全栈|Web3|中级|高级|资深).*?(工程师|开发|程序员|架构师)"),
    re.compile(r"(技术负责人|项目经理|团队负责人)"),
    re.compile(r"(Frontend|Backend|Full Stack|Senior|Junior).*?(Engineer|Developer|Architect)", re.IGNORECASE),
    re.compile(r"(Tech Lead|Project Manager|Team Lead)", re.IGNORECASE),
    re.compile(r"(Software|Data|Web|Mobile|DevOps|Machine Learning)\s+(Engineer|Developer|Scientist)", re.IGNORECASE),
)
MAX_FIELD_LENGTH = 50

# -------- Projects --------
PROJECT_SECTION = re.compile(r"项目经历|项目背景|核心项目|主要项目")
PROJECT_HEADING = re.compile(r"### ([^（(]+)")
PROJECT_TECH = re.compile(
    r"React|Vue|Angular|Node\.js|Python|JavaScript|TypeScript|Java|HTML|CSS|MongoDB|MySQL|AWS|Docker"
    r"|Next\.js|Nuxt\.js|Web3|Blockchain|Solidity|ethers\.js|wagmi|viem|UnoCSS|Tailwind",
    re.IGNORECASE,
)
KNOWN_PROJECTS = ("Wallet 后台", "NFT商城", "L3E7", "Ucollex", "组件库", "SDK")

# -------- Skills --------
TECHNICAL_SKILLS = (
    # Frontend
    "JavaScript", "TypeScript", "React", "Vue", "Angular", "Next.js", "Nuxt.js",
    "HTML", "CSS", "Tailwind", "UnoCSS", "SCSS", "Less",
    # Backend
    "Node.js", "Python", "Java", "C++", "C#", "PHP", "Go", "Rust",
    "Express", "Koa", "NestJS", "Django", "Spring",
    # Database
    "MongoDB", "MySQL", "PostgreSQL", "Redis", "Elasticsearch",
    # Cloud & DevOps
    "AWS", "Azure", "Docker", "Kubernetes", "Git", "GitHub", "GitLab",
    "CI/CD", "Jenkins", "Linux",
    # Web3
    "Web3", "Blockchain", "Solidity", "ethers.js", "wagmi", "viem",
    # Mobile
    "React Native", "Flutter", "Swift", "Kotlin",
    # Other
    "GraphQL", "REST", "WebSocket", "Microservices",
)
CHINESE_SKILLS = {
    "前端": "Frontend Development",
    "后端": "Backend Development",
    "全栈": "Full Stack Development",
    "移动端": "Mobile Development",
    "数据库": "Database",
    "云计算": "Cloud Computing",
    "微服务": "Microservices",
    "容器化": "Containerization",
    "自动化测试": "Automated Testing",
    "性能优化": "Performance Optimization",
    "架构设计": "Architecture Design",
}
SOFT_SKILLS = (
    (re.compile(r"leadership|领导力|团队领导", re.IGNORECASE), "Leadership"),
    (re.compile(r"communication|沟通能力|沟通", re.IGNORECASE), "Communication"),
    (re.compile(r"teamwork|团队合作|协作", re.IGNORECASE), "Teamwork"),
    (re.compile(r"problem.solving|解决问题|问题解决", re.IGNORECASE), "Problem Solving"),
    (re.compile(r"project.management|项目管理", re.IGNORECASE), "Project Management"),
    (re.compile(r"learning.agility|学习能力|快速学习", re.IGNORECASE), "Learning Agility"),
    (re.compile(r"analytical|分析能力|分析思维", re.IGNORECASE), "Analytical Thinking"),
    (re.compile(r"creativity|创新思维|创造力", re.IGNORECASE), "Creativity"),
    (re.compile(r"attention.to.detail|细致|注重细节", re.IGNORECASE), "Attention to Detail"),
    (re.compile(r"time.management|时间管理", re.IGNORECASE), "Time Management"),
)
TECHNICAL_CATEGORY = "Technical Skills"
SOFT_CATEGORY = "Soft Skills"

CERTIFICATION_PATTERNS = (
    re.compile(r"AWS\s+Certified", re.IGNORECASE),
    re.compile(r"Google\s+Cloud", re.IGNORECASE),
    re.compile(r"Microsoft\s+Certified", re.IGNORECASE),
    re.compile(r"Certified\s+[A-Za-z][\w-]*", re.IGNORECASE | re.ASCII),
    re.compile(r"认证"),
)
LANGUAGE_PATTERNS = (
    re.compile(r"English|英语", re.IGNORECASE),
    re.compile(r"Chinese|中文|汉语", re.IGNORECASE),
    re.compile(r"Spanish|西班牙语", re.IGNORECASE),
    re.compile(r"French|法语", re.IGNORECASE),
    re.compile(r"German|德语", re.IGNORECASE),
    re.compile(r"Japanese|日语", re.IGNORECASE),
)

# -------- Derived metrics --------
INDUSTRY_KEYWORDS = {
    "Technology": ("tech", "software", "ai", "ml", "data", "cloud", "startup", "web3", "blockchain",
                   "科技", "软件", "人工智能", "技术", "互联网", "前端", "后端", "开发", "程序"),
    "Finance": ("finance", "bank", "fintech", "trading", "investment",
                "金融", "银行", "投资", "支付", "区块链"),
    "Gaming": ("game", "gaming", "entertainment", "nft",
               "游戏", "娱乐", "电竞"),
    "E-commerce": ("ecommerce", "retail", "shopping", "marketplace",
                   "电商", "零售", "购物", "商城"),
    "Education": ("education", "university", "school", "academic",
                  "教育", "大学", "学校", "培训"),
    "Healthcare": ("health", "medical", "pharma", "biotech",
                   "医疗", "健康", "生物", "医药"),
    "Media": ("media", "content", "publishing", "social",
              "媒体", "内容", "出版", "社交"),
}
DEFAULT_INDUSTRY = "Technology"

PROGRESSION_LADDERS = (
    ("intern", "junior", "senior", "lead", "principal"),
    ("developer", "senior developer", "tech lead", "architect"),
    ("assistant", "associate", "manager", "director"),
    ("实习", "初级", "中级", "高级", "资深", "专家", "主管", "经理"),
)

AI_TAG_KEYWORDS = {
    "developer": (
        "developer", "engineer", "programming", "software", "coding", "development",
        "frontend", "backend", "fullstack", "web development", "mobile app", "react", "vue", "angular",
        "javascript", "typescript", "node.js", "python", "java", "web3", "blockchain",
        "开发", "工程师", "编程", "软件", "前端", "后端", "全栈", "程序员", "技术",
    ),
    "researcher": (
        "research", "researcher", "phd", "publications", "paper", "academic",
        "laboratory", "study", "analysis", "investigation",
        "研究", "博士", "论文", "学术", "实验室", "分析",
    ),
    "founder": (
        "founder", "startup", "co-founder", "entrepreneur", "founded", "established",
        "创始人", "创业", "联合创始人", "创立",
    ),
    "teacher": (
        "teacher", "professor", "lecturer", "instructor", "teaching", "education",
        "教师", "教授", "讲师", "教学", "教育",
    ),
    "designer": (
        "ui designer", "ux designer", "graphic designer", "product designer", "design lead",
        "设计师", "ui设计", "ux设计", "产品设计", "视觉设计",
    ),
    "creator": (
        "creator", "content creator", "artist", "creative director", "generative", "ai art",
        "创作者", "内容创作", "艺术", "创意", "生成",
    ),
}
AI_TAG_WEIGHTS = {"developer": 2}
AI_TAG_PRIORITY = ("developer", "researcher", "founder", "teacher", "designer", "creator")
STRONG_DEVELOPER_TITLES = ("前端工程师", "后端工程师", "web3工程师", "软件工程师", "frontend engineer", "backend engineer")
DEVELOPER_SHORT_CIRCUIT_SCORE = 3
DEFAULT_AI_TAG = "practitioner"

POSITION_TRANSLATIONS = {
    "软件工程师": "Software Engineer",
    "前端工程师": "Frontend Engineer",
    "后端工程师": "Backend Engineer",
    "全栈工程师": "Full Stack Engineer",
    "Web3工程师": "Web3 Engineer",
    "技术负责人": "Tech Lead",
    "项目经理": "Project Manager",
    "产品经理": "Product Manager",
    "架构师": "Software Architect",
    "开发工程师": "Development Engineer",
    "高级工程师": "Senior Engineer",
    "资深工程师": "Senior Engineer",
}

# Buckets are checked in order: web3, then fullstack (frontend and backend), frontend, backend.
ROLE_SKILL_BUCKETS = {
    "web3": ("web3", "blockchain", "solidity", "ethereum", "smart contract"),
    "frontend": ("react", "vue", "angular", "javascript", "typescript", "html", "css"),
    "backend": ("node.js", "python", "java", "go", "php", "c#", "spring", "django"),
}
ROLE_TITLES = {
    "web3": {"zh": "Web3工程师", "en": "Web3 Engineer"},
    "fullstack": {"zh": "全栈工程师", "en": "Full Stack Engineer"},
    "frontend": {"zh": "前端工程师", "en": "Frontend Engineer"},
    "backend": {"zh": "后端工程师", "en": "Backend Engineer"},
    "generic": {"zh": "软件工程师", "en": "Software Engineer"},
}
