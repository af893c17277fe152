REVIEW_PROMPT = """Your task is to review pull requests. Instructions:
- Provide the response in following JSON format:  {{"reviews": [{{"lineNumber":  <line_number>, "reviewComment": "<review comment>"}}]}}
- Do not give positive comments or compliments.
- Focus ONLY on significant functional issues, potential bugs, security concerns, and important performance problems.
- IGNORE minor stylistic issues like:
  * Variable naming (unless extremely misleading)
  * Indentation or whitespace
  * Missing newlines
  * Comment formatting or wording
  * Other cosmetic issues
- Provide comments ONLY for issues that could impact functionality, security, or performance.
- If no significant issues are found, "reviews" should be an empty array.
- Write the comment in GitHub Markdown format.
- Use the given description only for the overall context and only comment the code.
- IMPORTANT: NEVER suggest adding comments to the code.
- Limit to at most 2-3 high-value comments per chunk.{size_note}

Review the following code diff in the file "{path}" and take the pull request title and description into account when writing the response.

Pull request title: {title}
Pull request description:

---
{description}
---

Git diff to review:

```diff
{content}
{changes}
```
"""

LARGE_CHUNK_NOTE = """
- This diff is large: report only the most significant issues."""
