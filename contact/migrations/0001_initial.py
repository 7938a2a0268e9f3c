# Generated manually for the contact_submissions table
from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='ContactSubmission',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Name of the person getting in touch', max_length=100)),
                ('email', models.EmailField(help_text='Address to reply to', max_length=320)),
                ('message', models.TextField(help_text='The message content (10-5000 characters)')),
                ('ip_address', models.GenericIPAddressField(blank=True, help_text='IP address of the submitter (for rate limiting and spam review)', null=True)),
                ('user_agent', models.TextField(blank=True, help_text='Browser user agent', null=True)),
                ('submitted_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, editable=False, help_text='When the message was submitted')),
                ('is_read', models.BooleanField(db_index=True, default=False)),
                ('is_archived', models.BooleanField(db_index=True, default=False)),
                ('read_at', models.DateTimeField(blank=True, help_text='First time the submission was marked read', null=True)),
                ('notes', models.TextField(blank=True, help_text='Private notes from the admin', null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Contact Submission',
                'verbose_name_plural': 'Contact Submissions',
                'db_table': 'contact_submissions',
                'ordering': ['-submitted_at', '-id'],
                'indexes': [
                    models.Index(fields=['is_archived', 'submitted_at'], name='contact_sub_is_arch_5c1e0b_idx'),
                    models.Index(fields=['email'], name='contact_sub_email_9a7f2d_idx'),
                ],
            },
        ),
    ]
