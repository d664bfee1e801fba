"""
openventuro.templates - Jinja2 Scaffold Templates
=================================================

This package contains the Jinja2 templates rendered by
``openventuro.generator``. Apart from three placeholders the templates are
static text and render byte for byte.

Template Naming Convention
--------------------------
- Templates end with `.j2` extension
- Output paths are listed in ``generator.TEMPLATE_MAPPINGS``
- Dotfiles drop the dot: `gitignore.j2` → `.gitignore`, `env.example.j2` → `.env.example`

Available Templates
-------------------
Root:
    - package.json.j2: Workspace manifest (project name)
    - pnpm-workspace.yaml.j2, turbo.json.j2, tsconfig.base.json.j2
    - gitignore.j2
    - env.example.j2: Environment template (deploy target)
    - README.md.j2: Project readme (project name)
    - scripts/cloud-init.yaml.j2

api/:
    Hono API service (package.json, tsconfig.json, src/index.ts)

web/:
    Next.js marketing site with Tailwind and the shadcn base setup

packages/:
    - package.json.j2: Manifest shared by every workspace package
    - index.ts.j2: Empty entry module

Template Context
----------------
    project_name : str
        Resolved project name

    deploy_target : str
        ``vercel`` or ``cloudflare-worker``

    package : str
        Workspace package name (packages/ templates only)
"""
