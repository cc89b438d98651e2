from fastapi import FastAPI, Depends, HTTPException, Query, UploadFile, File
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import OAuth2PasswordBearer
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, EmailStr, field_validator
from sqlalchemy.orm import Session
from typing import Optional, List, Dict, Any, Tuple
from datetime import datetime
import logging
import os

from jose import JWTError

from portfolio.config import (
    CORS_ORIGINS,
    UPLOADS_DIR,
    BLOGS_PER_PAGE,
    ADMIN_PAGE_SIZE,
    LOG_LEVEL,
)
from portfolio.db.engine import Base, engine, SessionLocal
from portfolio.models.content_models import Blog, Project
from portfolio.models.skill_models import Skill
from portfolio.models.user_models import User

from portfolio.services.auth_utils import (
    hash_password,
    verify_password,
    create_access_token,
    decode_access_token,
)
from portfolio.services.categories import (
    Category,
    build_category_index,
    category_label,
    category_slug_of,
    matches_category,
    suggest_other_categories,
)
from portfolio.services.content_fields import (
    BLOG_NOT_NULL,
    BLOG_REQUIRED,
    BLOG_RESERVED_CATEGORY_SLUGS,
    PROJECT_NOT_NULL,
    PROJECT_REQUIRED,
    SKILL_NOT_NULL,
    SKILL_REQUIRED,
    check_not_null,
    check_required,
    prepare_content_fields,
)
from portfolio.services.content_filters import (
    BLOG,
    PROJECT,
    ContentKind,
    SORT_NEWEST,
    sort_records,
)
from portfolio.services.content_repository import ContentRepository
from portfolio.services.content_stats import (
    reading_time,
    blog_stats,
    project_stats,
    dashboard_stats,
)
from portfolio.services.errors import (
    RepositoryError,
    RepositoryFetchError,
    RecordNotFound,
    ValidationError,
)
from portfolio.services.listing import ListingState
from portfolio.services.skills import (
    SKILL_CATEGORY_LABELS,
    filter_skills,
    group_skills,
    skill_categories,
)
from portfolio.services.slugs import parse_csv_list, slugify
from portfolio.services.uploads import UploadError, save_upload, public_url

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Portfolio CMS API", version="1.0.0")

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")

#  CORS setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Uploaded images (see services/uploads.py)
app.mount("/uploads", StaticFiles(directory=UPLOADS_DIR, check_dir=False), name="uploads")


# --- DB Session Dependency ---
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# --- Repositories (override these in tests) ---
def get_blog_repository(db: Session = Depends(get_db)) -> ContentRepository:
    return ContentRepository(db, Blog)


def get_project_repository(db: Session = Depends(get_db)) -> ContentRepository:
    return ContentRepository(db, Project)


def get_skill_repository(db: Session = Depends(get_db)) -> ContentRepository:
    return ContentRepository(db, Skill)


# --- Create tables on startup ---
@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    os.makedirs(UPLOADS_DIR, exist_ok=True)


# --- Schemas (Pydantic models) ---

class BlogOut(BaseModel):
    id: int
    title: str
    slug: str
    author: str = ""
    excerpt: Optional[str] = None
    content: Optional[str] = None
    tags: List[str] = []
    featured_image: Optional[str] = None
    category: Optional[str] = None
    category_slug: Optional[str] = None
    meta_description: Optional[str] = None
    keywords: Optional[List[str]] = None
    published: bool = False
    featured: bool = False
    reading_time: int = 1
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_list(cls, v):
        return v or []

    @field_validator("author", mode="before")
    @classmethod
    def _author_str(cls, v):
        return v or ""

    @field_validator("published", "featured", mode="before")
    @classmethod
    def _flag(cls, v):
        return bool(v)

    class Config:
        from_attributes = True


class ProjectOut(BaseModel):
    id: int
    title: str
    slug: str
    description: str
    content: Optional[str] = None
    technologies: List[str] = []
    category: Optional[str] = None
    category_slug: Optional[str] = None
    featured_image: Optional[str] = None
    github_url: Optional[str] = None
    live_url: Optional[str] = None
    published: bool = False
    featured: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("technologies", mode="before")
    @classmethod
    def _technologies_list(cls, v):
        return v or []

    @field_validator("published", "featured", mode="before")
    @classmethod
    def _flag(cls, v):
        return bool(v)

    class Config:
        from_attributes = True


class SkillOut(BaseModel):
    id: int
    name: str
    website_url: str
    icon_url: Optional[str] = None
    category: str = "other"
    featured: bool = False
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class BlogCreate(BaseModel):
    # title/content are checked by check_required so a missing field is a 400, not a 422
    title: Optional[str] = None
    slug: Optional[str] = None
    author: str = ""
    excerpt: Optional[str] = None
    content: Optional[str] = None
    tags: List[str] = []
    featured_image: Optional[str] = None
    category: Optional[str] = None
    meta_description: Optional[str] = None
    keywords: Optional[List[str]] = None
    published: bool = False
    featured: bool = False

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, v):
        return parse_csv_list(v)


class BlogUpdate(BaseModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    author: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[List[str]] = None
    featured_image: Optional[str] = None
    category: Optional[str] = None
    meta_description: Optional[str] = None
    keywords: Optional[List[str]] = None
    published: Optional[bool] = None
    featured: Optional[bool] = None

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, v):
        return parse_csv_list(v)


class ProjectCreate(BaseModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    technologies: List[str] = []
    category: Optional[str] = None
    featured_image: Optional[str] = None
    github_url: Optional[str] = None
    live_url: Optional[str] = None
    published: bool = False
    featured: bool = False

    @field_validator("technologies", mode="before")
    @classmethod
    def _split_technologies(cls, v):
        return parse_csv_list(v)


class ProjectUpdate(BaseModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    technologies: Optional[List[str]] = None
    category: Optional[str] = None
    featured_image: Optional[str] = None
    github_url: Optional[str] = None
    live_url: Optional[str] = None
    published: Optional[bool] = None
    featured: Optional[bool] = None

    @field_validator("technologies", mode="before")
    @classmethod
    def _split_technologies(cls, v):
        return parse_csv_list(v)


class SkillCreate(BaseModel):
    name: Optional[str] = None
    website_url: Optional[str] = None
    icon_url: Optional[str] = None
    category: str = "other"
    featured: bool = False


class SkillUpdate(BaseModel):
    name: Optional[str] = None
    website_url: Optional[str] = None
    icon_url: Optional[str] = None
    category: Optional[str] = None
    featured: Optional[bool] = None


class PublishedUpdate(BaseModel):
    published: bool


class FeaturedUpdate(BaseModel):
    featured: bool


class BlogListing(BaseModel):
    items: List[BlogOut]
    total: int
    total_pages: int
    current_page: int
    page_window: List[Optional[int]]
    categories: List[Category]
    error: Optional[str] = None


class CategoryPage(BlogListing):
    category: Category
    other_categories: List[Category]


class AuthorPage(BaseModel):
    author: str
    items: List[BlogOut]


class ProjectListing(BaseModel):
    items: List[ProjectOut]
    total: int
    total_pages: int
    current_page: int
    page_window: List[Optional[int]]
    categories: List[Category]
    technologies: List[str]
    error: Optional[str] = None


class AdminBlogListing(BlogListing):
    stats: Dict[str, int]


class AdminProjectListing(ProjectListing):
    stats: Dict[str, int]


class SkillsOut(BaseModel):
    skills: List[SkillOut]
    categories: List[str]
    category_labels: Dict[str, str]
    groups: Dict[str, List[SkillOut]]
    error: Optional[str] = None


class HomeOut(BaseModel):
    projects: List[ProjectOut]
    blogs: List[BlogOut]


class DashboardOut(BaseModel):
    stats: Dict[str, int]
    recent_blogs: List[BlogOut]
    recent_projects: List[ProjectOut]


class UploadOut(BaseModel):
    path: str
    url: str


# ----- Auth Pydantic models -----

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserOut(BaseModel):
    id: int
    email: EmailStr
    is_active: bool
    is_admin: bool

    class Config:
        from_attributes = True


class RegisterAdminRequest(BaseModel):
    email: EmailStr
    password: str


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


# ----- Helpers -----

def _blog_out(row: Any) -> BlogOut:
    out = BlogOut.model_validate(row)
    out.reading_time = reading_time(out.content)
    return out


def _project_out(row: Any) -> ProjectOut:
    return ProjectOut.model_validate(row)


def _http_error(e: RepositoryError) -> HTTPException:
    """
    Map a failed store call to the error response the client shows as a notification.
    """
    if isinstance(e, RecordNotFound):
        return HTTPException(status_code=404, detail=e.message)
    if isinstance(e, RepositoryFetchError):
        return HTTPException(status_code=503, detail=e.message)
    return HTTPException(status_code=500, detail=e.message)


def _load(load) -> Tuple[List[Any], Optional[str]]:
    """
    Run a listing call; on failure fall back to an empty collection plus the message.
    """
    try:
        return load(), None
    except RepositoryFetchError as e:
        return [], e.message


def _listing_state(
    records: List[Any],
    kind: ContentKind,
    page_size: int,
    page: int,
    category_slug: Optional[str] = None,
    **criteria,
) -> ListingState:
    state = ListingState(records, page_size=page_size, kind=kind)
    if category_slug:
        state.set_category(category_slug)
    state.update_criteria(**criteria)
    state.go_to(page)
    return state


def _blog_listing_fields(state: ListingState) -> Dict[str, Any]:
    results = state.results()
    page = state.page()
    return {
        "items": [_blog_out(b) for b in page.items],
        "total": len(results),
        "total_pages": page.total_pages,
        "current_page": state.current_page,
        "page_window": state.window(),
    }


def _project_listing_fields(state: ListingState) -> Dict[str, Any]:
    results = state.results()
    page = state.page()
    return {
        "items": [_project_out(p) for p in page.items],
        "total": len(results),
        "total_pages": page.total_pages,
        "current_page": state.current_page,
        "page_window": state.window(),
    }


def _distinct_technologies(projects: List[Any]) -> List[str]:
    seen: List[str] = []
    for project in projects:
        for tech in project.technologies or []:
            if tech not in seen:
                seen.append(tech)
    return seen


# ----- Auth helpers (dependencies) -----

def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """
    Decodes the bearer token and loads the owner account.
    """
    try:
        payload = decode_access_token(token)
    except JWTError:
        raise HTTPException(status_code=401, detail="Could not validate credentials")

    subject = payload.get("sub")
    if subject is None:
        raise HTTPException(status_code=401, detail="Invalid token payload")

    user = db.query(User).filter(User.email == subject).one_or_none()
    if not user:
        raise HTTPException(status_code=401, detail="User not found")

    if not user.is_active:
        raise HTTPException(status_code=403, detail="User is inactive")

    return user


def get_current_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    return user


# --- Endpoints ---

@app.get("/health")
def health():
    return JSONResponse({"status": "ok"})


# ----- Auth endpoints -----

@app.post("/auth/register-admin", response_model=UserOut)
def register_admin(
    payload: RegisterAdminRequest,
    db: Session = Depends(get_db),
):
    """
    Creates the site owner's account. Only allowed while no account exists.
    """
    if db.query(User).first() is not None:
        raise HTTPException(status_code=403, detail="Registration is closed")

    user = User(
        email=payload.email,
        hashed_password=hash_password(payload.password),
        is_admin=True,
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered owner account %s", user.email)
    return user


@app.post("/auth/login", response_model=Token)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
):
    user = db.query(User).filter(User.email == payload.email).one_or_none()
    if not user:
        raise HTTPException(status_code=401, detail="Incorrect email or password")

    if not verify_password(payload.password, user.hashed_password):
        raise HTTPException(status_code=401, detail="Incorrect email or password")

    if not user.is_active:
        raise HTTPException(status_code=403, detail="User is inactive")

    return Token(access_token=create_access_token(subject=user.email, is_admin=user.is_admin))


@app.get("/auth/me", response_model=UserOut)
def me(current_user: User = Depends(get_current_user)):
    return current_user


# ----- Public: home -----

@app.get("/home", response_model=HomeOut)
def home(
    blogs: ContentRepository = Depends(get_blog_repository),
    projects: ContentRepository = Depends(get_project_repository),
):
    """
    Landing page content: 6 projects (featured first, then newest) and the 3 latest posts.
    """
    project_rows, _ = _load(projects.list_published)
    blog_rows, _ = _load(blogs.list_published)

    ordered_projects = sort_records(project_rows, SORT_NEWEST)
    ordered_projects.sort(key=lambda p: bool(p.featured), reverse=True)

    return HomeOut(
        projects=[_project_out(p) for p in ordered_projects[:6]],
        blogs=[_blog_out(b) for b in sort_records(blog_rows, SORT_NEWEST)[:3]],
    )


# ----- Public: blogs -----

@app.get("/blogs", response_model=BlogListing)
def list_blogs(
    search: str = "",
    featured: str = "all",
    sort: str = SORT_NEWEST,
    category: str = "all",
    page: int = Query(1, ge=1),
    repo: ContentRepository = Depends(get_blog_repository),
):
    rows, error = _load(repo.list_published)
    state = _listing_state(
        rows, BLOG, BLOGS_PER_PAGE, page,
        search_term=search,
        featured_filter=featured,
        sort_by=sort,
        category_filter=category,
    )
    return BlogListing(
        **_blog_listing_fields(state),
        categories=build_category_index(rows),
        error=error,
    )


@app.get("/blogs/categories", response_model=List[Category])
def list_blog_categories(repo: ContentRepository = Depends(get_blog_repository)):
    rows, _ = _load(repo.list_published)
    return build_category_index(rows)


@app.get("/blogs/category/{category_slug}", response_model=CategoryPage)
def blog_category_page(
    category_slug: str,
    search: str = "",
    featured: str = "all",
    sort: str = SORT_NEWEST,
    page: int = Query(1, ge=1),
    repo: ContentRepository = Depends(get_blog_repository),
):
    rows, error = _load(repo.list_published)
    others = suggest_other_categories(rows, category_slug)

    state = _listing_state(
        rows, BLOG, BLOGS_PER_PAGE, page,
        category_slug=category_slug,
        search_term=search,
        featured_filter=featured,
        sort_by=sort,
    )
    in_category = state.in_category()
    if not in_category:
        raise HTTPException(
            status_code=404,
            detail={
                "message": f"The category '{category_slug}' doesn't exist or has no published posts.",
                "other_categories": [c.model_dump() for c in others],
                "error": error,
            },
        )

    return CategoryPage(
        **_blog_listing_fields(state),
        categories=build_category_index(rows),
        category=Category(
            label=category_label(in_category[0]),
            count=len(in_category),
            slug=category_slug,
        ),
        other_categories=others,
        error=error,
    )


@app.get("/blogs/author/{author}", response_model=AuthorPage)
def blogs_by_author(
    author: str,
    repo: ContentRepository = Depends(get_blog_repository),
):
    """
    Published posts by one author; the path may hold the name or its slug.
    """
    try:
        rows = repo.list_published()
    except RepositoryFetchError as e:
        raise _http_error(e)

    wanted = slugify(author)
    matches = [b for b in rows if b.author and (b.author == author or slugify(b.author) == wanted)]
    if not matches:
        raise HTTPException(status_code=404, detail="Author not found")

    return AuthorPage(
        author=matches[0].author,
        items=[_blog_out(b) for b in sort_records(matches, SORT_NEWEST)],
    )


@app.get("/blogs/{slug}", response_model=BlogOut)
def get_blog(
    slug: str,
    repo: ContentRepository = Depends(get_blog_repository),
):
    try:
        blog = repo.get_by_slug(slug)
    except RepositoryFetchError as e:
        raise _http_error(e)
    if not blog:
        raise HTTPException(status_code=404, detail="Blog post not found")
    out = _blog_out(blog)
    out.category_slug = category_slug_of(blog) or None
    return out


@app.get("/blogs/{category_slug}/{slug}", response_model=BlogOut)
def get_blog_in_category(
    category_slug: str,
    slug: str,
    repo: ContentRepository = Depends(get_blog_repository),
):
    try:
        blog = repo.get_by_slug(slug)
    except RepositoryFetchError as e:
        raise _http_error(e)
    if not blog or not matches_category(blog, category_slug):
        raise HTTPException(status_code=404, detail="Blog post not found")
    out = _blog_out(blog)
    out.category_slug = category_slug_of(blog)
    return out


# ----- Public: projects -----

@app.get("/projects", response_model=ProjectListing)
def list_projects(
    search: str = "",
    category: str = "all",
    featured: str = "all",
    sort: str = SORT_NEWEST,
    page: int = Query(1, ge=1),
    repo: ContentRepository = Depends(get_project_repository),
):
    rows, error = _load(repo.list_published)
    state = _listing_state(
        rows, PROJECT, BLOGS_PER_PAGE, page,
        search_term=search,
        category_filter=category,
        featured_filter=featured,
        sort_by=sort,
    )
    return ProjectListing(
        **_project_listing_fields(state),
        categories=build_category_index(rows),
        technologies=_distinct_technologies(rows),
        error=error,
    )


@app.get("/projects/{slug}", response_model=ProjectOut)
def get_project(
    slug: str,
    repo: ContentRepository = Depends(get_project_repository),
):
    try:
        project = repo.get_by_slug(slug)
    except RepositoryFetchError as e:
        raise _http_error(e)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return _project_out(project)


# ----- Public: skills -----

@app.get("/skills", response_model=SkillsOut)
def list_skills(
    category: str = "all",
    repo: ContentRepository = Depends(get_skill_repository),
):
    rows, error = _load(lambda: repo.list_all(order_by=(Skill.featured.desc(), Skill.name.asc())))
    selected = filter_skills(rows, category)
    return SkillsOut(
        skills=[SkillOut.model_validate(s) for s in selected],
        categories=skill_categories(rows),
        category_labels=SKILL_CATEGORY_LABELS,
        groups={
            name: [SkillOut.model_validate(s) for s in members]
            for name, members in group_skills(selected).items()
        },
        error=error,
    )


# ----- Admin: dashboard -----

@app.get("/admin/dashboard", response_model=DashboardOut)
def admin_dashboard(
    blogs: ContentRepository = Depends(get_blog_repository),
    projects: ContentRepository = Depends(get_project_repository),
    skills: ContentRepository = Depends(get_skill_repository),
    current_user: User = Depends(get_current_admin),
):
    blog_rows, _ = _load(blogs.list_all)
    project_rows, _ = _load(projects.list_all)
    skill_rows, _ = _load(skills.list_all)
    return DashboardOut(
        stats=dashboard_stats(blog_rows, project_rows, skill_rows),
        recent_blogs=[_blog_out(b) for b in blog_rows[:5]],
        recent_projects=[_project_out(p) for p in project_rows[:5]],
    )


# ----- Admin: blogs -----

@app.get("/admin/blogs", response_model=AdminBlogListing)
def admin_list_blogs(
    search: str = "",
    status: str = "all",
    featured: str = "all",
    sort: str = SORT_NEWEST,
    page: int = Query(1, ge=1),
    repo: ContentRepository = Depends(get_blog_repository),
    current_user: User = Depends(get_current_admin),
):
    rows, error = _load(repo.list_all)
    state = _listing_state(
        rows, BLOG, ADMIN_PAGE_SIZE, page,
        search_term=search,
        status_filter=status,
        featured_filter=featured,
        sort_by=sort,
    )
    return AdminBlogListing(
        **_blog_listing_fields(state),
        categories=build_category_index(rows),
        stats=blog_stats(rows),
        error=error,
    )


@app.post("/admin/blogs", response_model=BlogOut, status_code=201)
def admin_create_blog(
    payload: BlogCreate,
    repo: ContentRepository = Depends(get_blog_repository),
    current_user: User = Depends(get_current_admin),
):
    try:
        fields = prepare_content_fields(
            payload.model_dump(),
            BLOG_REQUIRED,
            reserved_category_slugs=BLOG_RESERVED_CATEGORY_SLUGS,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    try:
        blog_id = repo.insert(fields)
        return _blog_out(repo.get_by_id(blog_id))
    except RepositoryError as e:
        raise _http_error(e)


@app.get("/admin/blogs/{blog_id}", response_model=BlogOut)
def admin_get_blog(
    blog_id: int,
    repo: ContentRepository = Depends(get_blog_repository),
    current_user: User = Depends(get_current_admin),
):
    try:
        blog = repo.get_by_id(blog_id)
    except RepositoryFetchError as e:
        raise _http_error(e)
    if not blog:
        raise HTTPException(status_code=404, detail="Blog not found")
    return _blog_out(blog)


@app.put("/admin/blogs/{blog_id}", response_model=BlogOut)
def admin_update_blog(
    blog_id: int,
    payload: BlogUpdate,
    repo: ContentRepository = Depends(get_blog_repository),
    current_user: User = Depends(get_current_admin),
):
    try:
        existing = repo.get_by_id(blog_id)
        if not existing:
            raise HTTPException(status_code=404, detail="Blog not found")
        fields = prepare_content_fields(
            payload.model_dump(exclude_unset=True),
            BLOG_REQUIRED,
            existing,
            not_null=BLOG_NOT_NULL,
            reserved_category_slugs=BLOG_RESERVED_CATEGORY_SLUGS,
        )
        repo.update(blog_id, fields)
        return _blog_out(repo.get_by_id(blog_id))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except RepositoryError as e:
        raise _http_error(e)


@app.patch("/admin/blogs/{blog_id}/published", response_model=BlogOut)
def admin_set_blog_published(
    blog_id: int,
    payload: PublishedUpdate,
    repo: ContentRepository = Depends(get_blog_repository),
    current_user: User = Depends(get_current_admin),
):
    try:
        repo.update(blog_id, {"published": payload.published})
        return _blog_out(repo.get_by_id(blog_id))
    except RepositoryError as e:
        raise _http_error(e)


@app.patch("/admin/blogs/{blog_id}/featured", response_model=BlogOut)
def admin_set_blog_featured(
    blog_id: int,
    payload: FeaturedUpdate,
    repo: ContentRepository = Depends(get_blog_repository),
    current_user: User = Depends(get_current_admin),
):
    try:
        repo.update(blog_id, {"featured": payload.featured})
        return _blog_out(repo.get_by_id(blog_id))
    except RepositoryError as e:
        raise _http_error(e)


@app.delete("/admin/blogs/{blog_id}")
def admin_delete_blog(
    blog_id: int,
    repo: ContentRepository = Depends(get_blog_repository),
    current_user: User = Depends(get_current_admin),
):
    try:
        repo.delete(blog_id)
    except RepositoryError as e:
        raise _http_error(e)
    return {"deleted": True, "id": blog_id}


# ----- Admin: projects -----

@app.get("/admin/projects", response_model=AdminProjectListing)
def admin_list_projects(
    search: str = "",
    status: str = "all",
    category: str = "all",
    featured: str = "all",
    sort: str = SORT_NEWEST,
    page: int = Query(1, ge=1),
    repo: ContentRepository = Depends(get_project_repository),
    current_user: User = Depends(get_current_admin),
):
    rows, error = _load(repo.list_all)
    state = _listing_state(
        rows, PROJECT, ADMIN_PAGE_SIZE, page,
        search_term=search,
        status_filter=status,
        category_filter=category,
        featured_filter=featured,
        sort_by=sort,
    )
    return AdminProjectListing(
        **_project_listing_fields(state),
        categories=build_category_index(rows),
        technologies=_distinct_technologies(rows),
        stats=project_stats(rows),
        error=error,
    )


@app.post("/admin/projects", response_model=ProjectOut, status_code=201)
def admin_create_project(
    payload: ProjectCreate,
    repo: ContentRepository = Depends(get_project_repository),
    current_user: User = Depends(get_current_admin),
):
    try:
        fields = prepare_content_fields(payload.model_dump(), PROJECT_REQUIRED)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    try:
        project_id = repo.insert(fields)
        return _project_out(repo.get_by_id(project_id))
    except RepositoryError as e:
        raise _http_error(e)


@app.get("/admin/projects/{project_id}", response_model=ProjectOut)
def admin_get_project(
    project_id: int,
    repo: ContentRepository = Depends(get_project_repository),
    current_user: User = Depends(get_current_admin),
):
    try:
        project = repo.get_by_id(project_id)
    except RepositoryFetchError as e:
        raise _http_error(e)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return _project_out(project)


@app.put("/admin/projects/{project_id}", response_model=ProjectOut)
def admin_update_project(
    project_id: int,
    payload: ProjectUpdate,
    repo: ContentRepository = Depends(get_project_repository),
    current_user: User = Depends(get_current_admin),
):
    try:
        existing = repo.get_by_id(project_id)
        if not existing:
            raise HTTPException(status_code=404, detail="Project not found")
        fields = prepare_content_fields(
            payload.model_dump(exclude_unset=True),
            PROJECT_REQUIRED,
            existing,
            not_null=PROJECT_NOT_NULL,
        )
        repo.update(project_id, fields)
        return _project_out(repo.get_by_id(project_id))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except RepositoryError as e:
        raise _http_error(e)


@app.patch("/admin/projects/{project_id}/published", response_model=ProjectOut)
def admin_set_project_published(
    project_id: int,
    payload: PublishedUpdate,
    repo: ContentRepository = Depends(get_project_repository),
    current_user: User = Depends(get_current_admin),
):
    try:
        repo.update(project_id, {"published": payload.published})
        return _project_out(repo.get_by_id(project_id))
    except RepositoryError as e:
        raise _http_error(e)


@app.patch("/admin/projects/{project_id}/featured", response_model=ProjectOut)
def admin_set_project_featured(
    project_id: int,
    payload: FeaturedUpdate,
    repo: ContentRepository = Depends(get_project_repository),
    current_user: User = Depends(get_current_admin),
):
    try:
        repo.update(project_id, {"featured": payload.featured})
        return _project_out(repo.get_by_id(project_id))
    except RepositoryError as e:
        raise _http_error(e)


@app.delete("/admin/projects/{project_id}")
def admin_delete_project(
    project_id: int,
    repo: ContentRepository = Depends(get_project_repository),
    current_user: User = Depends(get_current_admin),
):
    try:
        repo.delete(project_id)
    except RepositoryError as e:
        raise _http_error(e)
    return {"deleted": True, "id": project_id}


# ----- Admin: skills -----

@app.get("/admin/skills", response_model=List[SkillOut])
def admin_list_skills(
    repo: ContentRepository = Depends(get_skill_repository),
    current_user: User = Depends(get_current_admin),
):
    try:
        return repo.list_all()
    except RepositoryFetchError as e:
        raise _http_error(e)


@app.post("/admin/skills", response_model=SkillOut, status_code=201)
def admin_create_skill(
    payload: SkillCreate,
    repo: ContentRepository = Depends(get_skill_repository),
    current_user: User = Depends(get_current_admin),
):
    fields = payload.model_dump()
    try:
        check_required(fields, SKILL_REQUIRED)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    try:
        skill_id = repo.insert(fields)
        return repo.get_by_id(skill_id)
    except RepositoryError as e:
        raise _http_error(e)


@app.get("/admin/skills/{skill_id}", response_model=SkillOut)
def admin_get_skill(
    skill_id: int,
    repo: ContentRepository = Depends(get_skill_repository),
    current_user: User = Depends(get_current_admin),
):
    try:
        skill = repo.get_by_id(skill_id)
    except RepositoryFetchError as e:
        raise _http_error(e)
    if not skill:
        raise HTTPException(status_code=404, detail="Skill not found")
    return skill


@app.put("/admin/skills/{skill_id}", response_model=SkillOut)
def admin_update_skill(
    skill_id: int,
    payload: SkillUpdate,
    repo: ContentRepository = Depends(get_skill_repository),
    current_user: User = Depends(get_current_admin),
):
    fields = payload.model_dump(exclude_unset=True)
    try:
        check_required(fields, SKILL_REQUIRED, partial=True)
        check_not_null(fields, SKILL_NOT_NULL)
        repo.update(skill_id, fields)
        return repo.get_by_id(skill_id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except RepositoryError as e:
        raise _http_error(e)


@app.delete("/admin/skills/{skill_id}")
def admin_delete_skill(
    skill_id: int,
    repo: ContentRepository = Depends(get_skill_repository),
    current_user: User = Depends(get_current_admin),
):
    try:
        repo.delete(skill_id)
    except RepositoryError as e:
        raise _http_error(e)
    return {"deleted": True, "id": skill_id}


# ----- Admin: image uploads -----

@app.post("/admin/uploads/{folder}", response_model=UploadOut)
async def admin_upload_image(
    folder: str,
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_admin),
):
    data = await file.read()
    try:
        path = save_upload(folder, file.filename, data)
    except UploadError as e:
        raise HTTPException(status_code=400, detail=e.message)
    logger.info("Uploaded %s (%d bytes)", path, len(data))
    return UploadOut(path=path, url=public_url(path))
