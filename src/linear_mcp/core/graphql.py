"""GraphQL documents sent to the Linear API."""

from __future__ import annotations

from typing import Sequence

ISSUE_FIELDS = """
    id
    identifier
    title
    url
    priority
    state { id name }
    assignee { id name }
    project { id name }
"""

CREATE_ISSUE = f"""
mutation CreateIssue($input: IssueCreateInput!) {{
  issueCreate(input: $input) {{
    success
    issue {{ {ISSUE_FIELDS} }}
  }}
}}
"""

CREATE_ISSUES = f"""
mutation CreateIssues($input: IssueBatchCreateInput!) {{
  issueBatchCreate(input: $input) {{
    success
    issues {{ {ISSUE_FIELDS} }}
  }}
}}
"""

CREATE_PROJECT = """
mutation CreateProject($input: ProjectCreateInput!) {
  projectCreate(input: $input) {
    success
    project { id name url }
  }
}
"""

UPDATE_ISSUES = """
mutation UpdateIssues($ids: [UUID!]!, $input: IssueUpdateInput!) {
  issueBatchUpdate(ids: $ids, input: $input) {
    success
    issues { id identifier }
  }
}
"""

SEARCH_ISSUES = f"""
query SearchIssues(
  $filter: IssueFilter
  $first: Int
  $after: String
  $orderBy: PaginationOrderBy
) {{
  issues(filter: $filter, first: $first, after: $after, orderBy: $orderBy) {{
    pageInfo {{ hasNextPage endCursor }}
    nodes {{ {ISSUE_FIELDS} description }}
  }}
}}
"""

DELETE_ISSUE = """
mutation DeleteIssue($id: String!) {
  issueDelete(id: $id) {
    success
  }
}
"""

CREATE_COMMENT = """
mutation CreateComment($input: CommentCreateInput!) {
  commentCreate(input: $input) {
    success
    comment { id body url }
  }
}
"""

UPDATE_COMMENT = """
mutation UpdateComment($id: String!, $input: CommentUpdateInput!) {
  commentUpdate(id: $id, input: $input) {
    success
    comment { id body url }
  }
}
"""

DELETE_COMMENT = """
mutation DeleteComment($id: String!) {
  commentDelete(id: $id) {
    success
  }
}
"""

RESOLVE_COMMENT = """
mutation ResolveComment($id: String!, $resolvingCommentId: String) {
  commentResolve(id: $id, resolvingCommentId: $resolvingCommentId) {
    success
    comment { id resolvedAt }
  }
}
"""

UNRESOLVE_COMMENT = """
mutation UnresolveComment($id: String!) {
  commentUnresolve(id: $id) {
    success
    comment { id resolvedAt }
  }
}
"""

GET_TEAMS = """
query Teams {
  teams {
    nodes {
      id
      name
      key
      states { nodes { id name type } }
      labels { nodes { id name } }
    }
  }
}
"""

GET_VIEWER = """
query Viewer {
  viewer {
    id
    name
    email
    teams { nodes { id name key } }
  }
}
"""

GET_PROJECT = """
query Project($id: String!) {
  project(id: $id) {
    id
    name
    description
    url
    state
    teams { nodes { id name } }
    issues { nodes { id identifier title } }
  }
}
"""

SEARCH_PROJECTS = """
query SearchProjects($filter: ProjectFilter) {
  projects(filter: $filter) {
    nodes {
      id
      name
      description
      url
      teams { nodes { id name } }
    }
  }
}
"""

CREATE_CUSTOMER_NEED_FROM_ATTACHMENT = """
mutation CreateCustomerNeedFromAttachment(
  $input: CustomerNeedCreateFromAttachmentInput!
) {
  customerNeedCreateFromAttachment(input: $input) {
    success
    need { id body issue { id identifier title url } }
  }
}
"""


def delete_issues_document(count: int) -> str:
    """Build one mutation holding ``count`` aliased ``issueDelete`` fields.

    Variables are named ``id0``..``idN``; aliases are ``delete0``..``deleteN``.
    """
    params = ", ".join(f"$id{i}: String!" for i in range(count))
    fields = "\n".join(
        f"  delete{i}: issueDelete(id: $id{i}) {{ success }}" for i in range(count)
    )
    return f"mutation DeleteIssues({params}) {{\n{fields}\n}}\n"


def delete_issues_variables(ids: Sequence[str]) -> dict:
    return {f"id{i}": issue_id for i, issue_id in enumerate(ids)}


__all__ = [
    "CREATE_ISSUE",
    "CREATE_ISSUES",
    "CREATE_PROJECT",
    "UPDATE_ISSUES",
    "SEARCH_ISSUES",
    "DELETE_ISSUE",
    "CREATE_COMMENT",
    "UPDATE_COMMENT",
    "DELETE_COMMENT",
    "RESOLVE_COMMENT",
    "UNRESOLVE_COMMENT",
    "GET_TEAMS",
    "GET_VIEWER",
    "GET_PROJECT",
    "SEARCH_PROJECTS",
    "CREATE_CUSTOMER_NEED_FROM_ATTACHMENT",
    "delete_issues_document",
    "delete_issues_variables",
]
