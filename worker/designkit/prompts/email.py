from __future__ import annotations

from html import escape

from designkit.models import Submission

DISPLAY_NAME_FALLBACK = "Your App"
COURSE_URL = "https://www.appin30days.com"


def display_name(submission: Submission) -> str:
    return submission.app_name or DISPLAY_NAME_FALLBACK


def email_subject(submission: Submission) -> str:
    return f"{display_name(submission)} Design Kit Ready! 🎨"


def results_email_html(submission: Submission, results_url: str, year: int) -> str:
    """Render the "your design kit is ready" email linking to the results page."""
    app_name = escape(display_name(submission))
    greeting = escape(submission.name or "there")
    url = escape(results_url, quote=True)

    return f"""\
<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
  </head>
  <body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
    <div style="background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); padding: 40px 20px; text-align: center; border-radius: 20px 20px 0 0;">
      <h1 style="color: white; margin: 0; font-size: 32px;">Your {app_name} Design Kit is Ready! 🎨</h1>
    </div>

    <div style="background: white; padding: 40px 30px; border-radius: 0 0 20px 20px; box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);">
      <p style="font-size: 18px; margin-bottom: 20px;">Hi {greeting}!</p>

      <p style="margin-bottom: 20px;">Your custom app design kit is ready to view. We've created:</p>

      <ul style="margin-bottom: 30px; padding-left: 20px;">
        <li style="margin-bottom: 10px;"><strong>Visual Moodboard</strong> - 9 curated images matching your app's vibe</li>
        <li style="margin-bottom: 10px;"><strong>Custom Color Palette</strong> - Perfectly matched colors with hex codes</li>
        <li style="margin-bottom: 10px;"><strong>Claude Code Prompt</strong> - Ready-to-use prompt to start building</li>
        <li style="margin-bottom: 10px;"><strong>Complete Design Brief</strong> - All your preferences in one place</li>
      </ul>

      <div style="text-align: center; margin: 40px 0;">
        <a href="{url}" style="display: inline-block; background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; padding: 16px 32px; text-decoration: none; border-radius: 50px; font-weight: bold; font-size: 18px;">
          View Your Design Kit →
        </a>
      </div>

      <div style="background: #f0f9ff; border-left: 4px solid #667eea; padding: 20px; margin: 30px 0; border-radius: 8px;">
        <h3 style="margin-top: 0; color: #667eea;">Ready to Build Your App?</h3>
        <p style="margin-bottom: 15px;">Join our course to learn how to use Claude Code and AI to build real iOS apps—no coding experience needed.</p>
        <a href="{COURSE_URL}" style="color: #667eea; text-decoration: none; font-weight: bold;">
          Learn More About the Course →
        </a>
      </div>

      <p style="color: #666; font-size: 14px; margin-top: 40px; padding-top: 20px; border-top: 1px solid #eee;">
        Questions? Just reply to this email.<br>
        We're here to help you bring your app idea to life!
      </p>
    </div>

    <div style="text-align: center; padding: 20px; color: #999; font-size: 12px;">
      <p>Build Your First App with Claude Code</p>
      <p>© {year} appin30days.com</p>
    </div>
  </body>
</html>
"""
